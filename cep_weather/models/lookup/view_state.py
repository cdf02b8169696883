from typing import Literal, Optional

from pydantic import BaseModel, Field

from cep_weather.models.address.address import AddressRecord

ErrorKind = Literal[
    "address_not_found",
    "coordinates_unavailable",
    "weather_query_failed",
    "unknown_failure",
]


class ViewState(BaseModel):
    """
    State of one lookup submission.

    Owned by whoever hosts the lookup (an API request, a UI session) and
    passed by reference into the orchestrator, which mutates it in place.
    """

    normalized_code: str = Field(default="", description="Digit-only CEP")
    address_record: Optional[AddressRecord] = Field(None, description="Resolved address")
    temperature: Optional[float] = Field(None, description="Current temperature in Celsius")
    error_message: Optional[str] = Field(None, description="User-facing error message")
    error_kind: Optional[ErrorKind] = Field(None, description="Error category")
    in_flight: bool = Field(default=False, description="Whether a lookup is pending")
    submission_id: int = Field(default=0, ge=0, description="Sequence number of the latest submission")

    def reset(self, submission_id: int):
        """Clear results from any previous submission and mark a new one in flight."""
        self.normalized_code = ""
        self.address_record = None
        self.temperature = None
        self.error_message = None
        self.error_kind = None
        self.in_flight = True
        self.submission_id = submission_id

    @property
    def succeeded(self) -> bool:
        return not self.in_flight and self.error_message is None and self.address_record is not None
