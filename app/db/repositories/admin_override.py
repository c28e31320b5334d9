"""Admin override repository."""

import datetime
from typing import Optional

from sqlmodel import Session, select

from app.models.admin_override import AdminOverrideRecord, utcnow


class AdminOverrideRepository:
    """Repository for AdminOverrideRecord database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, record: AdminOverrideRecord) -> AdminOverrideRecord:
        self.session.add(record)
        self.session.commit()
        self.session.refresh(record)
        return record

    def get_by_id(self, override_id: int) -> Optional[AdminOverrideRecord]:
        return self.session.get(AdminOverrideRecord, override_id)

    def list_for_user(
        self,
        user_id: str,
        plan_date: Optional[datetime.date] = None,
        active_only: bool = False,
    ) -> list[AdminOverrideRecord]:
        """Overrides for a user, oldest first; optionally one date / active only."""
        statement = select(AdminOverrideRecord).where(AdminOverrideRecord.user_id == user_id)
        if plan_date is not None:
            statement = statement.where(AdminOverrideRecord.plan_date == plan_date)
        if active_only:
            statement = statement.where(AdminOverrideRecord.is_active == True)  # noqa: E712
        statement = statement.order_by(AdminOverrideRecord.created_at, AdminOverrideRecord.id)
        return list(self.session.exec(statement).all())

    def list_active_between(
        self,
        user_id: str,
        start: datetime.date,
        end: datetime.date,
    ) -> list[AdminOverrideRecord]:
        """Active overrides with ``start <= plan_date <= end``."""
        statement = (
            select(AdminOverrideRecord)
            .where(AdminOverrideRecord.user_id == user_id)
            .where(AdminOverrideRecord.plan_date >= start)
            .where(AdminOverrideRecord.plan_date <= end)
            .where(AdminOverrideRecord.is_active == True)  # noqa: E712
            .order_by(AdminOverrideRecord.created_at, AdminOverrideRecord.id)
        )
        return list(self.session.exec(statement).all())

    def deactivate(self, record: AdminOverrideRecord) -> AdminOverrideRecord:
        record.is_active = False
        record.deactivated_at = utcnow()
        self.session.add(record)
        self.session.commit()
        self.session.refresh(record)
        return record
