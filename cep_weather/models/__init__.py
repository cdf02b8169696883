from cep_weather.models.address import AddressRecord
from cep_weather.models.lookup import ErrorKind, LookupRequest, ViewState
from cep_weather.models.weather import ForecastResponse, HourlyForecast

__all__ = [
    "AddressRecord",
    "ErrorKind",
    "ForecastResponse",
    "HourlyForecast",
    "LookupRequest",
    "ViewState",
]
