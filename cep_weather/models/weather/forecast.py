from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class HourlyForecast(BaseModel):
    """Hourly series from the forecast response."""

    time: List[str] = Field(default_factory=list, description="ISO8601 timestamps")
    temperature_2m: List[Optional[float]] = Field(
        default_factory=list, description="Air temperature at 2 meters in Celsius"
    )


class ForecastResponse(BaseModel):
    """Open-Meteo forecast API response model."""

    model_config = ConfigDict(extra="ignore")

    latitude: Optional[float] = Field(None, ge=-90, le=90, description="Grid cell latitude")
    longitude: Optional[float] = Field(None, ge=-180, le=180, description="Grid cell longitude")
    timezone: Optional[str] = Field(None, description="Timezone of the series")
    hourly_units: Optional[dict] = Field(None, description="Units of the hourly variables")
    hourly: Optional[HourlyForecast] = Field(None, description="Hourly forecast series")

    def current_temperature(self) -> Optional[float]:
        """First hourly temperature, or None when the series is missing or empty."""
        if self.hourly is None or not self.hourly.temperature_2m:
            return None
        return self.hourly.temperature_2m[0]
