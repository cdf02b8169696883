from cep_weather.api.v1 import router as v1_router
from cep_weather.api.web import web_router

__all__ = ["v1_router", "web_router"]
