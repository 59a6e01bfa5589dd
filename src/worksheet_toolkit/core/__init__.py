"""
Worksheet Toolkit Core Package

Shared data models, schema validation and serialization helpers used by
the layout and measurement packages.
"""

from .models import (
    Role,
    classify,
    Element,
    MeasuredElement,
    ContentMode,
    Page,
    MeasurementRecord,
    PaginationResult,
)

__all__ = [
    "Role",
    "classify",
    "Element",
    "MeasuredElement",
    "ContentMode",
    "Page",
    "MeasurementRecord",
    "PaginationResult",
]
