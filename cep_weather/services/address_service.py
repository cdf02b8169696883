import structlog
from pydantic import ValidationError

from cep_weather.config.config import config
from cep_weather.exceptions.lookup import AddressNotFoundError, LookupServiceError
from cep_weather.models.address.address import AddressRecord
from cep_weather.services.base_service import BaseLookupService

logger = structlog.get_logger(__name__)


class AddressService(BaseLookupService):
    """
    Service resolving a CEP to an address and coordinates.

    Wraps the AwesomeAPI CEP endpoint: ``GET {base_url}/json/{code}``.
    """

    service_name = "endereço"

    def __init__(self):
        """Initialize the address service."""
        super().__init__()

        if hasattr(self, "_address_initialized"):
            return

        self.base_url = config.address_base_url

        self._address_initialized = True

    async def get_address(self, code: str) -> AddressRecord:
        """
        Get the address for a normalized CEP.

        Args:
            code: Digit-only CEP

        Returns:
            AddressRecord as returned by the service

        Raises:
            AddressNotFoundError: If the code is empty or the service answers with a non-success status
            LookupServiceError: For transport errors or a malformed payload
        """
        if not code:
            logger.info("Empty CEP, skipping address request")
            raise AddressNotFoundError()

        logger.info("Fetching address", code=code)
        response = await self._make_request(f"{self.base_url}/json/{code}")

        if not response.is_success:
            logger.warning(
                "Address lookup failed",
                code=code,
                status_code=response.status_code,
                response_text=response.text,
            )
            raise AddressNotFoundError()

        payload = self._parse_json(response)
        try:
            address = AddressRecord.model_validate(payload)
        except ValidationError as e:
            logger.error("Failed to parse address data", code=code, error=str(e))
            raise LookupServiceError()

        logger.info("Successfully fetched address", code=code, city=address.city, state=address.state)
        return address


address_service = AddressService()
