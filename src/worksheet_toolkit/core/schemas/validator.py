"""
Schema Validation Utilities

Validates generated worksheet element lists before they reach the
measurement pass.

Two levels:
- Basic checks (always): list of objects, sane ``measuredHeight`` values
- Strict mode: full JSON Schema validation via ``jsonschema``
  (``type`` becomes required and must be a non-empty string)

Lenient mode exists because the paginator tolerates missing or unknown
types (they are laid out as ordinary content).
"""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any

import jsonschema


ELEMENTS_SCHEMA_NAME = "elements"

# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def unwrap_elements(data: Any) -> list[Any]:
    """
    Return the element list from a payload.

    Accepts either a bare list or an object with an ``elements`` list
    (the shape of a generation response).

    Raises:
        ValidationError: If no element list can be found
    """
    if isinstance(data, list):
        return data
    if isinstance(data, dict) and isinstance(data.get("elements"), list):
        return data["elements"]
    raise ValidationError(
        f"Expected a list of elements or an object with 'elements', got {type(data).__name__}",
        path="",
    )


def validate_elements(data: Any, *, strict: bool = False) -> list[Any]:
    """
    Validate an element list payload.

    Args:
        data: List of element dicts, or ``{"elements": [...]}``
        strict: If True, also validate against elements.schema.json

    Returns:
        The unwrapped element list

    Raises:
        ValidationError: If data is invalid
    """
    elements = unwrap_elements(data)

    for i, item in enumerate(elements):
        path = f"[{i}]"
        if not isinstance(item, dict):
            raise ValidationError(
                f"Element must be an object, got {type(item).__name__}",
                path=path,
            )
        if "properties" in item and not isinstance(item["properties"], dict):
            raise ValidationError(
                "properties must be an object",
                path=f"{path}.properties",
            )
        if "measuredHeight" in item:
            height = item["measuredHeight"]
            if (
                isinstance(height, bool)
                or not isinstance(height, (int, float))
                or not math.isfinite(height)
                or height < 0
            ):
                raise ValidationError(
                    f"Invalid measuredHeight: {height!r} (must be a finite non-negative number)",
                    path=f"{path}.measuredHeight",
                )

    if strict:
        schema = _load_schema(ELEMENTS_SCHEMA_NAME)
        validator = jsonschema.Draft7Validator(schema)
        errors = list(validator.iter_errors(elements))
        if errors:
            first = errors[0]
            raise ValidationError(
                f"Schema validation failed: {first.message}",
                path=".".join(str(p) for p in first.absolute_path),
                errors=[e.message for e in errors],
            )

    return elements
