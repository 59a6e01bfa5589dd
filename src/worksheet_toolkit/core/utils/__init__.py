"""Core utilities: JSON serialization of element lists and results."""

from .serialization import (
    ElementPayload,
    elements_from_payload,
    load_elements,
    result_to_json,
    write_result,
)

__all__ = [
    "ElementPayload",
    "elements_from_payload",
    "load_elements",
    "result_to_json",
    "write_result",
]
