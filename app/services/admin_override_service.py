"""
Admin override service.

Validates override payloads against the content catalog before they are
stored, and converts rows to the engine-facing
:class:`~app.schemas.admin_override.AdminOverride` value.
"""

import datetime
from typing import Optional

from fastapi import HTTPException, status
from loguru import logger
from sqlmodel import Session

from app.catalog import ContentCatalog, default_catalog
from app.db.repositories.admin_override import AdminOverrideRepository
from app.models.admin_override import AdminOverrideRecord
from app.schemas.admin_override import AdminOverride, AdminOverrideCreate, OverrideComponent
from app.schemas.catalog import MealType
from app.schemas.profile import FastingPattern


class AdminOverrideService:
    """Service for creating, listing and deactivating admin overrides."""

    def __init__(self, session: Session, catalog: Optional[ContentCatalog] = None):
        self.repo = AdminOverrideRepository(session)
        self.catalog = catalog or default_catalog

    def create_override(self, data: AdminOverrideCreate) -> AdminOverride:
        self._check_new_value(data.component, data.new_value)

        record = AdminOverrideRecord(
            user_id=data.user_id,
            plan_date=data.plan_date,
            component=data.component.value,
            reason=data.reason,
            overridden_by=data.overridden_by,
            original_value=data.original_value,
            new_value=data.new_value,
        )
        record = self.repo.create(record)
        logger.info(
            "Admin override created",
            override_id=record.id,
            user_id=record.user_id,
            component=record.component,
            overridden_by=record.overridden_by,
        )
        return self._to_schema(record)

    def list_overrides(
        self,
        user_id: str,
        plan_date: Optional[datetime.date] = None,
        active_only: bool = False,
    ) -> list[AdminOverride]:
        records = self.repo.list_for_user(user_id, plan_date, active_only)
        return [self._to_schema(r) for r in records]

    def active_overrides_between(
        self, user_id: str, start: datetime.date, end: datetime.date,
    ) -> list[AdminOverride]:
        records = self.repo.list_active_between(user_id, start, end)
        return [self._to_schema(r) for r in records]

    def deactivate_override(self, override_id: int) -> AdminOverride:
        record = self.repo.get_by_id(override_id)
        if not record:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Override {override_id} not found",
            )
        if record.is_active:
            record = self.repo.deactivate(record)
            logger.info("Admin override deactivated", override_id=override_id)
        return self._to_schema(record)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _check_new_value(self, component: OverrideComponent, value) -> None:
        """Reject payloads the synthesizer could never apply."""
        if component is OverrideComponent.FASTING:
            try:
                FastingPattern(value)
            except ValueError:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail=f"Unknown fasting pattern: {value!r}",
                )
        elif component is OverrideComponent.WORKOUT:
            if not isinstance(value, str) or self.catalog.get_workout(value) is None:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail=f"Unknown workout: {value!r}",
                )
        elif component is OverrideComponent.MEAL:
            meal_id = value.get("meal_id") if isinstance(value, dict) else None
            meal = self.catalog.get_meal(meal_id) if isinstance(meal_id, str) else None
            if meal is None or meal.meal_type.value != value.get("meal_type"):
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail=(
                        "Meal override needs {meal_type, meal_id} naming an existing "
                        f"meal of that type; valid types: {[t.value for t in MealType]}"
                    ),
                )

    @staticmethod
    def _to_schema(record: AdminOverrideRecord) -> AdminOverride:
        return AdminOverride.model_validate(record)
