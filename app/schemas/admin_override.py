"""
Admin override schemas.

An override replaces one component of a user's plan for a given date.  The
repository persists them; the synthesizer only ever receives
:class:`AdminOverride` values.

``new_value`` shape per component:

* ``fasting``: a fasting pattern string, e.g. ``"14:10"``
* ``workout``: a workout template id
* ``meal``   : ``{"meal_type": "lunch", "meal_id": "turkey_stir_fry"}``
"""

import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class OverrideComponent(str, Enum):
    WORKOUT = "workout"
    MEAL = "meal"
    FASTING = "fasting"


class AdminOverrideCreate(BaseModel):
    """Payload for creating an override."""

    user_id: str = Field(..., min_length=1)
    plan_date: datetime.date
    component: OverrideComponent
    reason: str = Field(..., min_length=1, max_length=500)
    overridden_by: str = Field(..., min_length=1, max_length=255)
    original_value: Optional[Any] = None
    new_value: Any


class AdminOverride(BaseModel):
    """A stored override, as handed to the engine and returned by the API."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: int
    user_id: str
    plan_date: datetime.date
    component: OverrideComponent
    reason: str
    overridden_by: str
    original_value: Optional[Any] = None
    new_value: Any
    is_active: bool = True
    created_at: datetime.datetime
    deactivated_at: Optional[datetime.datetime] = None
