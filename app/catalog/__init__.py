"""
Content catalog.

Importing this package registers the built-in exercise, meal and workout
libraries.  ``default_catalog`` serves them to the synthesizer.
"""

from app.catalog.base import ContentCatalog
from app.catalog.memory import InMemoryCatalog

default_catalog: ContentCatalog = InMemoryCatalog()

__all__ = ["ContentCatalog", "InMemoryCatalog", "default_catalog"]
