import structlog
from fastapi import APIRouter, Path

from cep_weather.models.lookup import LookupRequest, ViewState
from cep_weather.services.lookup_orchestrator import lookup_orchestrator
from cep_weather.utils.cep import format_code, is_well_formed

logger = structlog.get_logger(__name__)

# Create router
router = APIRouter(prefix="/lookup", tags=["Lookup"])


async def _run_lookup(raw_code: str) -> ViewState:
    if not is_well_formed(raw_code):
        # Soft validation only: the lookup still runs on the normalized digits
        logger.warning("CEP does not match the expected format", raw_code=raw_code)

    state = await lookup_orchestrator.submit(raw_code)

    logger.info(
        "Lookup request finished",
        cep=format_code(state.normalized_code),
        succeeded=state.succeeded,
        error_kind=state.error_kind,
    )
    return state


@router.post("", summary="Look Up CEP", response_model=ViewState)
async def lookup_cep(request: LookupRequest):
    """
    Resolve a CEP to its address and current temperature.

    Lookup failures are reported inside the returned view state
    (``error_message``/``error_kind``), never as an HTTP error.

    Args:
        request: Payload carrying the CEP as typed by the user.

    Returns:
        The final view state of the submission.
    """
    logger.info("API request: Look up CEP", cep=request.cep)
    return await _run_lookup(request.cep)


@router.get("/{cep}", summary="Look Up CEP by Path", response_model=ViewState)
async def lookup_cep_by_path(
    cep: str = Path(..., max_length=9, description="CEP, e.g. 01001-000 or 01001000"),
):
    """Same as ``POST /lookup`` with the CEP taken from the path."""
    logger.info("API request: Look up CEP by path", cep=cep)
    return await _run_lookup(cep)
