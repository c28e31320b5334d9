"""
Progression endpoints.
"""

from fastapi import APIRouter

from app.regimen.progression import adjustments_for
from app.schemas.progression import ProgressionAdjustments, ProgressionRequest

router = APIRouter()


@router.post(
    "/adjustments",
    summary="Compute plan adjustments from adherence history.",
    response_model=ProgressionAdjustments,
)
def compute_adjustments(data: ProgressionRequest):
    return adjustments_for(data.user, data.factors)
