from cep_weather.api.web.web_routes import router as web_router

__all__ = ["web_router"]
