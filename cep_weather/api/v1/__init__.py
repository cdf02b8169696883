from fastapi import APIRouter

from cep_weather.api.v1.lookup import lookup_router

# Create main router
router = APIRouter(prefix="/api/v1")

# Include all sub-routers
router.include_router(lookup_router)
