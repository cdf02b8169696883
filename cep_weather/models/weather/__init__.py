from cep_weather.models.weather.forecast import ForecastResponse, HourlyForecast

__all__ = ["ForecastResponse", "HourlyForecast"]
