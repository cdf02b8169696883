from cep_weather.exceptions.lookup.lookup_service_error import LookupServiceError


class WeatherQueryFailedError(LookupServiceError):
    """Exception for a non-success response from the forecast service."""

    kind = "weather_query_failed"
    default_message = "Erro ao consultar clima"
