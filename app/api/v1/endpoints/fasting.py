"""
Fasting window endpoints.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Query

from app.regimen.fasting import available_patterns, status_at, window_for
from app.schemas.fasting import FastingPatternInfo, FastingStatus, FastingWindow
from app.schemas.profile import FASTING_PATTERN_ORDER, FastingPattern

router = APIRouter()


@router.get(
    "/windows",
    summary="Eating window of every supported fasting pattern.",
    response_model=list[FastingWindow],
)
def list_windows():
    return [window_for(p) for p in FASTING_PATTERN_ORDER]


@router.get(
    "/patterns",
    summary="Selectable fasting patterns with descriptions.",
    response_model=list[FastingPatternInfo],
)
def list_patterns():
    return available_patterns()


@router.get(
    "/windows/{pattern}/status",
    summary="Fasting / eating phase of a pattern at an instant.",
    response_model=FastingStatus,
)
def get_status(
    pattern: FastingPattern,
    at: Optional[datetime.datetime] = Query(
        None, description="Wall-clock instant; defaults to now",
    ),
):
    return status_at(window_for(pattern), at or datetime.datetime.now())
