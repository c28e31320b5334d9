"""
Plan service.

Bridges the HTTP layer and the regimen engine: loads the user's stored
admin overrides, then calls the synthesizer.  The engine itself never
touches the database.
"""

import datetime
from typing import Optional

from sqlmodel import Session

from app.catalog import ContentCatalog, default_catalog
from app.core.config import settings
from app.regimen.export import format_for_export
from app.regimen.synthesizer import synthesize, synthesize_week
from app.schemas.plan import EnrichedDailyPlan, PlanExport, PlanRequest
from app.services.admin_override_service import AdminOverrideService


class PlanService:
    """Service for daily / weekly plan generation and export."""

    def __init__(self, session: Session, catalog: Optional[ContentCatalog] = None):
        self.catalog = catalog or default_catalog
        self.overrides = AdminOverrideService(session, self.catalog)

    def daily_plan(self, request: PlanRequest) -> EnrichedDailyPlan:
        overrides = self.overrides.active_overrides_between(
            request.user.user_id, request.date, request.date,
        )
        return synthesize(
            request.user, request.date, request.to_options(overrides), self.catalog,
        )

    def weekly_plan(self, request: PlanRequest) -> list[EnrichedDailyPlan]:
        """Seven plans starting at ``request.date``."""
        end = request.date + datetime.timedelta(days=6)
        overrides = self.overrides.active_overrides_between(
            request.user.user_id, request.date, end,
        )
        return synthesize_week(
            request.user, request.date, request.to_options(overrides), self.catalog,
        )

    def export_plan(self, request: PlanRequest) -> PlanExport:
        return format_for_export(self.daily_plan(request), settings.APP_DISPLAY_NAME)
