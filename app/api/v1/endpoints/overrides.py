"""
Admin override endpoints.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.db.session import get_db
from app.schemas.admin_override import AdminOverride, AdminOverrideCreate
from app.services.admin_override_service import AdminOverrideService

router = APIRouter()


@router.post(
    "",
    summary="Override one component of a user's plan for a date.",
    response_model=AdminOverride,
    status_code=status.HTTP_201_CREATED,
)
def create_override(data: AdminOverrideCreate, db: Session = Depends(get_db)):
    return AdminOverrideService(db).create_override(data)


@router.get(
    "",
    summary="List a user's overrides.",
    response_model=list[AdminOverride],
)
def list_overrides(
    user_id: str = Query(...),
    plan_date: Optional[datetime.date] = Query(None),
    active_only: bool = Query(False),
    db: Session = Depends(get_db),
):
    return AdminOverrideService(db).list_overrides(user_id, plan_date, active_only)


@router.post(
    "/{override_id}/deactivate",
    summary="Deactivate an override.  The row is kept for audit.",
    response_model=AdminOverride,
)
def deactivate_override(override_id: int, db: Session = Depends(get_db)):
    return AdminOverrideService(db).deactivate_override(override_id)
