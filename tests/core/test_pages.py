"""
Tests for core.models.pages

Test Coverage:
- Page validation and helpers
- MeasurementRecord.difference
- PaginationResult aggregates and to_dict() contract
"""

import json

import pytest

from worksheet_toolkit.core.models import (
    ContentMode,
    Element,
    MeasurementRecord,
    Page,
    PaginationResult,
)


@pytest.fixture
def result():
    pages = (
        Page(1, "Page 1", (Element("title-block"), Element("body-text")), height_used=120.0),
        Page(2, "Page 2", (Element("fill-blank"),), height_used=90.0),
    )
    log = (
        MeasurementRecord(0, "title-block", 80.0, 60.0),
        MeasurementRecord(1, "body-text", 80.0, 60.0),
        MeasurementRecord(2, "fill-blank", 80.0, 90.0, fallback=True),
    )
    return PaginationResult(pages=pages, measurement_log=log, warnings=["careful"])


class TestPage:
    """Tests for Page."""

    def test_page_number_must_be_positive(self):
        with pytest.raises(ValueError, match="page_number"):
            Page(0, "Page 0", ())

    def test_is_empty(self):
        assert Page(1, "Page 1", ()).is_empty
        assert not Page(1, "Page 1", (Element("divider"),)).is_empty

    def test_to_dict_uses_camel_case(self):
        page = Page(3, "Nature", (Element("divider"),), page_type=ContentMode.INTERACTIVE)

        data = page.to_dict()

        assert data["pageNumber"] == 3
        assert data["title"] == "Nature"
        assert data["pageType"] == "interactive"
        assert data["elements"] == [{"type": "divider", "properties": {}}]


class TestMeasurementRecord:
    """Tests for MeasurementRecord."""

    def test_difference_is_measured_minus_estimated(self):
        record = MeasurementRecord(0, "body-text", estimated_height=80.0, measured_height=95.0)

        assert record.difference == 15.0
        assert record.to_dict()["difference"] == 15.0


class TestPaginationResult:
    """Tests for PaginationResult."""

    def test_aggregates(self, result):
        assert result.total_pages == 2
        assert result.elements_per_page == [2, 1]
        assert result.total_elements == 3

    def test_iter_elements_in_reading_order(self, result):
        assert [e.type for e in result.iter_elements()] == ["title-block", "body-text", "fill-blank"]

    def test_page_of(self, result):
        assert result.page_of(0).page_number == 1
        assert result.page_of(2).page_number == 2
        assert result.page_of(3) is None
        assert result.page_of(-1) is None

    def test_empty_result(self):
        empty = PaginationResult(pages=())

        assert empty.total_pages == 0
        assert empty.elements_per_page == []

    def test_to_dict_is_json_serializable(self, result):
        data = json.loads(json.dumps(result.to_dict()))

        assert data["totalPages"] == 2
        assert data["elementsPerPage"] == [2, 1]
        assert data["measurementLog"][2]["fallback"] is True
        assert data["warnings"] == ["careful"]
