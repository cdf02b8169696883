from typing import Optional, Union

import structlog
from pydantic import ValidationError

from cep_weather.config.config import config
from cep_weather.exceptions.lookup import LookupServiceError, WeatherQueryFailedError
from cep_weather.models.weather.forecast import ForecastResponse
from cep_weather.services.base_service import BaseLookupService

logger = structlog.get_logger(__name__)


class WeatherService(BaseLookupService):
    """
    Service for the current temperature at a coordinate pair.

    Queries the Open-Meteo hourly forecast and takes the first hourly
    temperature as the current one.
    """

    service_name = "clima"

    def __init__(self):
        """Initialize the weather service."""
        super().__init__()

        if hasattr(self, "_weather_initialized"):
            return

        self.base_url = config.weather_base_url

        self._weather_initialized = True

    async def get_forecast(self, lat: Union[float, str], lng: Union[float, str]) -> ForecastResponse:
        """
        Get the hourly temperature forecast for a location.

        Args:
            lat: Latitude, as returned by the address service
            lng: Longitude, as returned by the address service

        Returns:
            ForecastResponse with the hourly series

        Raises:
            WeatherQueryFailedError: If the service answers with a non-success status
            LookupServiceError: For transport errors or a malformed payload
        """
        params = {"latitude": lat, "longitude": lng, "hourly": "temperature_2m"}
        response = await self._make_request(f"{self.base_url}/v1/forecast", params=params)

        if not response.is_success:
            logger.warning(
                "Forecast request failed",
                lat=lat,
                lng=lng,
                status_code=response.status_code,
                response_text=response.text,
            )
            raise WeatherQueryFailedError()

        payload = self._parse_json(response)
        try:
            return ForecastResponse.model_validate(payload)
        except ValidationError as e:
            logger.error("Failed to parse forecast data", lat=lat, lng=lng, error=str(e))
            raise LookupServiceError()

    async def get_current_temperature(self, lat: Union[float, str], lng: Union[float, str]) -> Optional[float]:
        """
        Get the current temperature in Celsius.

        Returns None when the forecast carries no hourly temperatures.
        """
        logger.info("Fetching current temperature", lat=lat, lng=lng)
        forecast = await self.get_forecast(lat, lng)
        temperature = forecast.current_temperature()

        if temperature is None:
            logger.info("Forecast has no hourly temperature", lat=lat, lng=lng)
        else:
            logger.info("Successfully fetched current temperature", lat=lat, lng=lng, temperature=temperature)
        return temperature


weather_service = WeatherService()
