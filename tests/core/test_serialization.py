"""
Tests for core.utils.serialization

Test Coverage:
- elements_from_payload(): Elements and optional measured heights
- load_elements(): File loading and JSON errors
- result_to_json() / write_result()
"""

import json

import pytest

from worksheet_toolkit.core.models import Element, Page, PaginationResult
from worksheet_toolkit.core.schemas import ValidationError
from worksheet_toolkit.core.utils import (
    elements_from_payload,
    load_elements,
    result_to_json,
    write_result,
)


class TestElementsFromPayload:
    """Tests for elements_from_payload()."""

    def test_heights_when_partially_measured_then_none_for_missing(self):
        payload = elements_from_payload([
            {"type": "divider", "measuredHeight": 4},
            {"type": "body-text", "properties": {"text": "hi"}},
        ])

        assert payload.elements == (Element("divider"), Element("body-text", {"text": "hi"}))
        assert payload.heights == (4.0, None)
        assert not payload.fully_measured

    def test_fully_measured(self):
        payload = elements_from_payload({"elements": [{"type": "divider", "measuredHeight": 0}]})

        assert payload.fully_measured


class TestLoadElements:
    """Tests for load_elements()."""

    def test_load_when_valid_file_then_elements(self, elements_file):
        payload = load_elements(elements_file)

        assert [e.type for e in payload.elements] == ["title-block", "body-text", "fill-blank"]
        assert payload.heights == (300.0, 400.0, 500.0)

    def test_load_when_invalid_json_then_validation_error(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[{", encoding="utf-8")

        with pytest.raises(ValidationError, match="Invalid JSON"):
            load_elements(path)


class TestResultOutput:
    """Tests for result_to_json() and write_result()."""

    def test_write_result_creates_parent_dirs(self, tmp_path):
        result = PaginationResult(pages=(Page(1, "Page 1", (Element("divider"),)),))
        target = tmp_path / "out" / "nested" / "result.json"

        write_result(result, target)

        data = json.loads(target.read_text(encoding="utf-8"))
        assert data["totalPages"] == 1
        assert data["pages"][0]["elements"] == [{"type": "divider", "properties": {}}]

    def test_result_to_json_keeps_unicode(self):
        result = PaginationResult(pages=(Page(1, "Über", ()),))

        assert "Über" in result_to_json(result)
