from fastapi import APIRouter

from issflyover.domains.satellite.api.satellite_api import router as satellite_router

api_router = APIRouter()
api_router.include_router(satellite_router, prefix="/satellite", tags=["Satellite"])
