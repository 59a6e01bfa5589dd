"""
Core Models Package

Immutable data models shared by the measurement pass, the paginator and
the page assembler.

**DESIGN RATIONALE:**

All models in this package are frozen dataclasses. This ensures:
1. No accidental mutation while elements move between pages
2. Paginated output can be compared element-by-element with the input
3. Roles are derived from ``type`` on demand, never stored
"""

from .roles import Role, classify
from .elements import Element, MeasuredElement
from .pages import ContentMode, Page, MeasurementRecord, PaginationResult

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
