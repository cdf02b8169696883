class CepWeatherError(Exception):
    """Base exception for the CEP weather application."""

    pass
