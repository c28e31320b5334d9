"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import fasting, overrides, personalization, plans, progression

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    personalization.router, prefix="/personalization", tags=["Personalization"]
)
api_router.include_router(
    fasting.router, prefix="/fasting", tags=["Fasting"]
)
api_router.include_router(
    progression.router, prefix="/progression", tags=["Progression"]
)
api_router.include_router(
    plans.router, prefix="/plans", tags=["Daily plans"]
)
api_router.include_router(
    overrides.router, prefix="/admin/overrides", tags=["Admin overrides"]
)
