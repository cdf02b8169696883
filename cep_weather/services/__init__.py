from cep_weather.services.address_service import AddressService, address_service
from cep_weather.services.lookup_orchestrator import LookupOrchestrator, lookup_orchestrator
from cep_weather.services.weather_service import WeatherService, weather_service

__all__ = [
    "AddressService",
    "LookupOrchestrator",
    "WeatherService",
    "address_service",
    "lookup_orchestrator",
    "weather_service",
]
