"""
Personalization endpoints.
"""

from fastapi import APIRouter, Query

from app.regimen.personalization import resolve
from app.schemas.profile import PersonalizationAssignment, WorkType

router = APIRouter()


@router.get(
    "/resolve",
    summary="Resolve fasting pattern, workout difficulty and meal intensity.",
    response_model=PersonalizationAssignment,
)
def resolve_assignment(
    weight: float = Query(..., description="Body weight in kg"),
    work_type: WorkType = Query(...),
):
    return resolve(weight, work_type)
