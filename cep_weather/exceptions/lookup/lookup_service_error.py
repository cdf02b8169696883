from typing import Optional

from cep_weather.exceptions.base import CepWeatherError


class LookupServiceError(CepWeatherError):
    """
    Base exception for lookup failures.

    Raised directly for transport errors, timeouts and malformed payloads,
    which all surface to the user as an unknown failure.
    """

    kind = "unknown_failure"
    default_message = "Erro ao consultar dados"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)
