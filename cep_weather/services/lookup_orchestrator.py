from typing import Optional

import structlog

from cep_weather.exceptions.lookup import CoordinatesUnavailableError, LookupServiceError
from cep_weather.models.lookup.view_state import ViewState
from cep_weather.services.address_service import address_service
from cep_weather.services.weather_service import weather_service
from cep_weather.utils.cep import normalize_code
from cep_weather.utils.singleton import Singleton

logger = structlog.get_logger(__name__)


class LookupOrchestrator(Singleton):
    """
    Resolves a CEP to its address and current temperature.

    A submission runs the address lookup and then the weather lookup at the
    returned coordinates, recording the outcome in a ``ViewState``:

    - success: ``address_record`` set, ``temperature`` set or None
    - failure: ``error_message``/``error_kind`` set, no partial results

    ``in_flight`` is cleared on every exit path. Each submission takes the
    next ``submission_id`` of the state it writes to; once a newer submission
    starts on the same state, the older one discards its results.
    """

    def __init__(self):
        """Initialize the orchestrator."""
        super().__init__()

        if hasattr(self, "_orchestrator_initialized"):
            return

        self.address_service = address_service
        self.weather_service = weather_service

        self._orchestrator_initialized = True

    async def submit(self, raw_code: str, view_state: Optional[ViewState] = None) -> ViewState:
        """
        Run one lookup submission.

        Args:
            raw_code: CEP as typed by the user
            view_state: State to update in place; a new one is created if omitted

        Returns:
            The updated view state. Lookup failures never propagate.
        """
        state = view_state if view_state is not None else ViewState()
        submission_id = state.submission_id + 1
        state.reset(submission_id)

        log = logger.bind(submission_id=submission_id)
        log.info("Lookup submitted", raw_code=raw_code)

        try:
            code = normalize_code(raw_code)
            state.normalized_code = code

            address = await self.address_service.get_address(code)
            if self._is_superseded(state, submission_id):
                log.info("Discarding superseded lookup", stage="address")
                return state

            if not address.has_coordinates():
                raise CoordinatesUnavailableError()

            temperature = await self.weather_service.get_current_temperature(address.lat, address.lng)
            if self._is_superseded(state, submission_id):
                log.info("Discarding superseded lookup", stage="weather")
                return state

            state.address_record = address
            state.temperature = temperature
            log.info("Lookup completed", code=code, city=address.city, temperature=temperature)

        except LookupServiceError as e:
            log.warning("Lookup failed", error_kind=e.kind, error=str(e))
            self._record_error(state, submission_id, str(e), e.kind)

        except Exception as e:
            log.error("Unexpected lookup failure", error=str(e), exc_info=True)
            self._record_error(state, submission_id, LookupServiceError.default_message, "unknown_failure")

        finally:
            if not self._is_superseded(state, submission_id):
                state.in_flight = False

        return state

    @staticmethod
    def _is_superseded(state: ViewState, submission_id: int) -> bool:
        return state.submission_id != submission_id

    def _record_error(self, state: ViewState, submission_id: int, message: str, kind: str):
        if self._is_superseded(state, submission_id):
            return
        state.address_record = None
        state.temperature = None
        state.error_message = message
        state.error_kind = kind


lookup_orchestrator = LookupOrchestrator()
