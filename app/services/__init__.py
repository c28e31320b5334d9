"""Business logic services."""

from app.services.admin_override_service import AdminOverrideService
from app.services.plan_service import PlanService

__all__ = [
    "AdminOverrideService",
    "PlanService",
]
