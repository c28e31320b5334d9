"""Database repositories."""

from app.db.repositories.admin_override import AdminOverrideRepository

__all__ = [
    "AdminOverrideRepository",
]
