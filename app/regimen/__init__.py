"""
Regimen engine: personalization, fasting windows, progression and daily
plan synthesis.

Pure computation: nothing in this package touches the database, the HTTP
layer or application settings.
"""

from app.regimen.export import format_for_export
from app.regimen.fasting import status_at, window_for
from app.regimen.personalization import assignment_for, resolve
from app.regimen.progression import adjustments_for
from app.regimen.synthesizer import (
    needs_regeneration,
    summarize,
    synthesize,
    synthesize_week,
)

__all__ = [
    "adjustments_for",
    "assignment_for",
    "format_for_export",
    "needs_regeneration",
    "resolve",
    "status_at",
    "summarize",
    "synthesize",
    "synthesize_week",
    "window_for",
]
