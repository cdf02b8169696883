import asyncio
from typing import Any, Dict, Optional

import httpx
import structlog

from cep_weather.config.config import config
from cep_weather.exceptions.lookup import LookupServiceError
from cep_weather.utils.singleton import Singleton

logger = structlog.get_logger(__name__)


class BaseLookupService(Singleton):
    """
    Shared HTTP plumbing for the upstream lookup services.

    Each request opens its own ``httpx.AsyncClient`` that follows redirects.
    ``request_timeout`` bounds the whole request, redirects included; the
    ``httpx.Timeout`` bounds each connect, read and write on top of it.
    Transport failures are wrapped in ``LookupServiceError``; status handling
    is left to the subclasses since each maps failures differently.
    """

    service_name = "lookup"

    def __init__(self):
        super().__init__()

        if hasattr(self, "_base_initialized"):
            return

        self.request_timeout = config.request_timeout
        self.timeout = httpx.Timeout(config.request_timeout, connect=config.connect_timeout)

        self._base_initialized = True

    async def _make_request(self, url: str, params: Optional[Dict[str, Any]] = None) -> httpx.Response:
        """
        Issue a GET request.

        Args:
            url: Absolute URL to fetch
            params: Optional query parameters

        Returns:
            The response, whatever its status code

        Raises:
            LookupServiceError: On timeout or any other transport error
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
                logger.info(
                    "Making API request",
                    service=self.service_name,
                    url=url,
                    params=params,
                )

                response = await asyncio.wait_for(
                    client.get(url, params=params), timeout=self.request_timeout
                )

                logger.info(
                    "API request completed",
                    service=self.service_name,
                    status_code=response.status_code,
                )
                return response

        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            logger.warning("Request timeout", service=self.service_name, url=url, error=str(e))
            raise LookupServiceError(f"Tempo esgotado ao consultar {self.service_name}")

        except httpx.RequestError as e:
            logger.warning("Request error", service=self.service_name, url=url, error=str(e))
            raise LookupServiceError()

    def _parse_json(self, response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            logger.error("Response body is not valid JSON", service=self.service_name, error=str(e))
            raise LookupServiceError()
