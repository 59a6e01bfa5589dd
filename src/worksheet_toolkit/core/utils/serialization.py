"""
Serialization Utilities

JSON in/out for worksheet element lists and pagination results.

- Input: the generation step's element list, optionally wrapped as
  ``{"elements": [...]}``; each item may carry a pre-measured
  ``measuredHeight`` which lets callers skip rendering.
- Output: ``PaginationResult.to_dict()`` written as JSON.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from ..models.elements import Element
from ..models.pages import PaginationResult
from ..schemas.validator import ValidationError, validate_elements


@dataclass(frozen=True)
class ElementPayload:
    """
    Parsed element list.

    Attributes:
        elements: Elements in reading order
        heights: Pre-measured height per element (None when absent)
    """
    elements: tuple[Element, ...]
    heights: tuple[Optional[float], ...]

    @property
    def fully_measured(self) -> bool:
        return all(h is not None for h in self.heights)


def elements_from_payload(data: Any, *, strict: bool = False) -> ElementPayload:
    """
    Parse an element list payload.

    Args:
        data: Decoded JSON (list or ``{"elements": [...]}``)
        strict: Validate against the JSON schema as well

    Raises:
        ValidationError: If the payload is malformed
    """
    items = validate_elements(data, strict=strict)
    elements = tuple(Element.from_dict(item) for item in items)
    heights = tuple(
        float(item["measuredHeight"]) if "measuredHeight" in item else None
        for item in items
    )
    return ElementPayload(elements=elements, heights=heights)


def load_elements(path: Path, *, strict: bool = False) -> ElementPayload:
    """
    Load an element list from a JSON file.

    Raises:
        ValidationError: If the file is not valid JSON or fails validation
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON in {path}: {e}", path=str(path)) from e
    return elements_from_payload(data, strict=strict)


def result_to_json(result: PaginationResult, *, indent: Optional[int] = 2) -> str:
    return json.dumps(result.to_dict(), indent=indent, ensure_ascii=False)


def write_result(result: PaginationResult, path: Path) -> Path:
    """Write the result as JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(result_to_json(result), encoding="utf-8")
    return path
