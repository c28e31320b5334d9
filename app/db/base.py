"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.admin_override import AdminOverrideRecord  # noqa: F401
