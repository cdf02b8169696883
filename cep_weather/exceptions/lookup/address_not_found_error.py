from cep_weather.exceptions.lookup.lookup_service_error import LookupServiceError


class AddressNotFoundError(LookupServiceError):
    """Exception for a CEP the address service could not resolve."""

    kind = "address_not_found"
    default_message = "CEP não encontrado"
