"""
Admin override model.

One row per override.  Rows are never deleted: deactivation flips
``is_active`` and stamps ``deactivated_at`` so the audit trail survives.
"""

import datetime
from typing import Any, Optional

from sqlalchemy import JSON, Column, DateTime
from sqlmodel import Field, SQLModel


def utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


class AdminOverrideRecord(SQLModel, table=True):
    """Persisted admin override of one plan component for one day."""

    __tablename__ = "admin_overrides"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(max_length=255, nullable=False, index=True)
    plan_date: datetime.date = Field(nullable=False, index=True)

    # workout | meal | fasting
    component: str = Field(max_length=20, nullable=False)
    reason: str = Field(max_length=500, nullable=False)
    overridden_by: str = Field(max_length=255, nullable=False)

    original_value: Optional[Any] = Field(default=None, sa_column=Column(JSON, nullable=True))
    new_value: Any = Field(sa_column=Column(JSON, nullable=False))

    is_active: bool = Field(default=True)

    # Timestamps (UTC, timezone-aware)
    created_at: datetime.datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))
    deactivated_at: Optional[datetime.datetime] = Field(default=None, sa_type=DateTime(timezone=True))
