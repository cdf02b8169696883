from cep_weather.exceptions.lookup.address_not_found_error import AddressNotFoundError
from cep_weather.exceptions.lookup.coordinates_unavailable_error import CoordinatesUnavailableError
from cep_weather.exceptions.lookup.lookup_service_error import LookupServiceError
from cep_weather.exceptions.lookup.weather_query_failed_error import WeatherQueryFailedError

__all__ = [
    "AddressNotFoundError",
    "CoordinatesUnavailableError",
    "LookupServiceError",
    "WeatherQueryFailedError",
]
