"""
Daily plan endpoints.
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.db.session import get_db
from app.schemas.plan import EnrichedDailyPlan, PlanExport, PlanRequest
from app.services.plan_service import PlanService

router = APIRouter()


@router.post(
    "/daily",
    summary="Synthesize the enriched plan for one day.",
    response_model=EnrichedDailyPlan,
)
def daily_plan(data: PlanRequest, db: Session = Depends(get_db)):
    return PlanService(db).daily_plan(data)


@router.post(
    "/weekly",
    summary="Synthesize seven consecutive plans starting at ``date``.",
    response_model=list[EnrichedDailyPlan],
)
def weekly_plan(data: PlanRequest, db: Session = Depends(get_db)):
    return PlanService(db).weekly_plan(data)


@router.post(
    "/export",
    summary="Presentation-ready export of one day's plan.",
    response_model=PlanExport,
)
def export_plan(data: PlanRequest, db: Session = Depends(get_db)):
    return PlanService(db).export_plan(data)
