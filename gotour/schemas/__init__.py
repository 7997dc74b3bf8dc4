"""
Go tour schemas - Pydantic models for the tour client.

This module exports all schema classes for:
- Catalog: modules, lessons, pages and files
- Run: execution events and formatter responses
"""

# Catalog schemas
from .catalog import (
    TourModel,
    File,
    Page,
    Lesson,
    Module,
    LessonCatalog,
)

# Run schemas
from .run import (
    EventKind,
    RunEvent,
    FormatResult,
)

__all__ = [
    # Catalog
    'TourModel',
    'File',
    'Page',
    'Lesson',
    'Module',
    'LessonCatalog',
    # Run
    'EventKind',
    'RunEvent',
    'FormatResult',
]
