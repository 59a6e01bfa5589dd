"""
Module: elements

Purpose:
    Provides the Element and MeasuredElement dataclasses. An Element is one
    atomic unit of worksheet content (heading, paragraph, exercise block);
    the paginator never subdivides it. A MeasuredElement pairs an Element
    with the real rendered height read by the measurement pass.

Key Functions:
    - Element.to_dict() / Element.from_dict(): Serialization
    - Element.role: Structural role derived from the type tag
    - MeasuredElement.effective_height(spacing): Height used by the paginator

Dependencies:
    - dataclasses (std)
    - .roles.classify

Used By:
    - measurement.provider: Creates MeasuredElements
    - layout.paginator: Consumes MeasuredElements
    - core.models.pages.Page
    - core.utils.serialization
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Mapping

from .roles import Role, classify


@dataclass(frozen=True)
class Element:
    """
    Atomic worksheet content element (immutable).

    The properties payload is opaque: layout code only ever looks at
    ``type``. Equality compares both type and payload so the paginated
    output can be checked against the input element by element.

    Attributes:
        type: Component type tag like "title-block" or "fill-blank"
        properties: Structured payload, passed through untouched

    Example:
        >>> el = Element("title-block", {"text": "Butterflies"})
        >>> el.role
        <Role.TITLE: 'title'>
    """

    type: str
    properties: Mapping[str, Any] = field(default_factory=dict, hash=False)

    @property
    def role(self) -> Role:
        """Structural role, computed on demand."""
        return classify(self.type)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the upstream ``{type, properties}`` shape."""
        return {"type": self.type, "properties": dict(self.properties)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Element:
        """
        Build an Element from a generated payload.

        A missing or non-string type becomes "" (classified as OTHER);
        a missing or non-mapping payload becomes an empty dict.
        """
        element_type = data.get("type")
        properties = data.get("properties")
        return cls(
            type=element_type if isinstance(element_type, str) else "",
            properties=dict(properties) if isinstance(properties, Mapping) else {},
        )


@dataclass(frozen=True)
class MeasuredElement:
    """
    Element with its measured height.

    Attributes:
        element: The source Element (returned unchanged on pages)
        measured_height: Rendered height in pixels (>= 0)
        element_id: Transient id of the measurement region; only
            meaningful during the measurement pass

    Invariants:
        - measured_height is finite and non-negative
    """

    element: Element
    measured_height: float
    element_id: str = ""

    def __post_init__(self) -> None:
        """Validate height on construction."""
        if not math.isfinite(self.measured_height) or self.measured_height < 0:
            raise ValueError(
                f"measured_height must be a non-negative number: {self.measured_height!r}"
            )

    @property
    def type(self) -> str:
        return self.element.type

    @property
    def role(self) -> Role:
        return self.element.role

    def effective_height(self, spacing: float) -> float:
        """Measured height plus the inter-element spacing."""
        return self.measured_height + spacing
