"""
Schemas Package

JSON schema definitions and validation utilities for worksheet input.
"""

from .validator import (
    validate_elements,
    unwrap_elements,
    ValidationError,
)

__all__ = [
    "validate_elements",
    "unwrap_elements",
    "ValidationError",
]
