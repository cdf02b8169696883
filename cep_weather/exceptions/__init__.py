from cep_weather.exceptions.base import CepWeatherError
from cep_weather.exceptions.lookup import (
    AddressNotFoundError,
    CoordinatesUnavailableError,
    LookupServiceError,
    WeatherQueryFailedError,
)

__all__ = [
    "CepWeatherError",
    "AddressNotFoundError",
    "CoordinatesUnavailableError",
    "LookupServiceError",
    "WeatherQueryFailedError",
]
