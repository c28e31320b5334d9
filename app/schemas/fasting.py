"""
Intermittent-fasting schemas.

A :class:`FastingWindow` is the canonical clock-time rendering of a
fasting pattern.  A :class:`FastingStatus` is a stateless projection of
"now" onto a window: callers that want a live countdown re-request it on
their own cadence.
"""

from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from app.schemas.profile import FastingPattern

_CLOCK_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def validate_clock_time(value: str) -> str:
    """Reject anything that is not a 24h ``HH:MM`` string."""
    if not _CLOCK_RE.match(value):
        raise ValueError(f"Expected HH:MM clock time, got {value!r}")
    return value


class FastingPhase(str, Enum):
    FASTING = "fasting"
    EATING = "eating"


class FastingWindow(BaseModel):
    """Concrete eating window for a fasting pattern."""

    model_config = ConfigDict(frozen=True)

    pattern: FastingPattern
    fasting_hours: int = Field(..., ge=0, le=24)
    eating_hours: int = Field(..., ge=0, le=24)
    eating_start_time: str = Field(..., description="HH:MM")
    eating_end_time: str = Field(..., description="HH:MM")

    @field_validator("eating_start_time", "eating_end_time")
    @classmethod
    def _clock(cls, value: str) -> str:
        return validate_clock_time(value)

    @model_validator(mode="after")
    def _hours_cover_the_day(self) -> FastingWindow:
        if self.fasting_hours + self.eating_hours != 24:
            raise ValueError("fasting_hours + eating_hours must equal 24")
        return self

    @property
    def fasting_start_time(self) -> str:
        return self.eating_end_time

    @property
    def fasting_end_time(self) -> str:
        return self.eating_start_time

    @property
    def label(self) -> str:
        """Display form, e.g. ``'12:00 - 20:00'``."""
        return f"{self.eating_start_time} - {self.eating_end_time}"


class FastingStatus(BaseModel):
    """Phase of a fasting window at a given instant."""

    model_config = ConfigDict(frozen=True)

    phase: FastingPhase
    percent_complete: float = Field(..., ge=0.0, le=100.0)
    seconds_remaining: int = Field(..., ge=0)
    phase_start_time: str
    phase_end_time: str
    next_phase_clock_time: str

    @property
    def minutes_remaining(self) -> int:
        return self.seconds_remaining // 60

    @property
    def time_remaining(self) -> tuple[int, int]:
        """``(hours, minutes)`` until the next phase change."""
        return divmod(self.minutes_remaining, 60)

    @property
    def is_fasting(self) -> bool:
        return self.phase is FastingPhase.FASTING


class FastingPatternInfo(BaseModel):
    """Entry of the list of selectable fasting patterns."""

    pattern: FastingPattern
    label: str
    description: str
    recommended_meal_count: int
