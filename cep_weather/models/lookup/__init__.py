from cep_weather.models.lookup.lookup_request import LookupRequest
from cep_weather.models.lookup.view_state import ErrorKind, ViewState

__all__ = ["ErrorKind", "LookupRequest", "ViewState"]
