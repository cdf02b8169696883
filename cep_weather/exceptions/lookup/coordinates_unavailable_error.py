from cep_weather.exceptions.lookup.lookup_service_error import LookupServiceError


class CoordinatesUnavailableError(LookupServiceError):
    """Exception for an address record without usable latitude/longitude."""

    kind = "coordinates_unavailable"
    default_message = "Latitude ou Longitude não disponíveis para este CEP"
