import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import worksheet_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from worksheet_toolkit.core.models import Element, MeasuredElement
from worksheet_toolkit.layout import LayoutConfig


# Short aliases used by the layout scenarios
TYPE_ALIASES = {
    "title": "title-block",
    "divider": "divider",
    "instructions": "instructions-box",
    "content": "body-text",
    "exercise": "fill-blank",
}


def make_measured(*specs):
    """
    Build MeasuredElements from ("title", 20) style tuples.

    Aliases map to a representative type tag; any other string is used as
    the type tag unchanged.
    """
    measured = []
    for n, (kind, height) in enumerate(specs):
        element = Element(TYPE_ALIASES.get(kind, kind), {"n": n})
        measured.append(MeasuredElement(element=element, measured_height=float(height)))
    return measured


# Common test fixtures
@pytest.fixture
def small_page():
    """100px of capacity with no spacing."""
    return LayoutConfig(
        page_width=200,
        page_height=100,
        padding_top=0,
        padding_right=0,
        padding_bottom=0,
        padding_left=0,
        element_spacing=0,
    )


@pytest.fixture
def sample_elements():
    """A small worksheet in reading order."""
    return [
        Element("title-block", {"text": "Butterflies"}),
        Element("instructions-box", {"text": "Read the text and answer."}),
        Element("body-text", {"text": "Butterflies start life as caterpillars."}),
        Element("fill-blank", {"items": [{"text": "A baby butterfly is a ___."}]}),
    ]


@pytest.fixture
def elements_file(tmp_path: Path):
    """Write an element list with pre-measured heights to disk."""
    import json

    data = {
        "elements": [
            {"type": "title-block", "properties": {"text": "Plants"}, "measuredHeight": 300},
            {"type": "body-text", "properties": {"text": "Roots take in water."}, "measuredHeight": 400},
            {"type": "fill-blank", "properties": {"items": []}, "measuredHeight": 500},
        ]
    }
    path = tmp_path / "elements.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def measured_factory():
    """Factory fixture wrapping make_measured()."""
    return make_measured
