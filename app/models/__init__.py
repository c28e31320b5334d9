"""SQLModel database models."""

from app.models.admin_override import AdminOverrideRecord

__all__ = [
    "AdminOverrideRecord",
]
