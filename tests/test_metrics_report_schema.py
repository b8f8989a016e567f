"""
tests/test_metrics_report_schema.py

Contract checks for the exported metrics report models.
"""

import pytest
from pydantic import ValidationError

from app.schemas.metrics_report import MetricsReportResponse, MetricsResponse, PersonMetricsResponse


def test_metrics_response_accepts_aliases_and_field_names() -> None:
    by_alias = MetricsResponse(average=1.5, min=1.0, max=2.0)
    by_name = MetricsResponse(average=1.5, minimum=1.0, maximum=2.0)

    assert by_alias == by_name
    assert by_alias.model_dump(by_alias=True) == {"average": 1.5, "min": 1.0, "max": 2.0}


def test_metrics_response_rejects_extra_fields() -> None:
    with pytest.raises(ValidationError):
        MetricsResponse(average=1.0, min=1.0, max=1.0, median=1.0)


def test_person_metrics_requires_name() -> None:
    with pytest.raises(ValidationError):
        PersonMetricsResponse(name="", average=1.0, min=1.0, max=1.0)


def test_report_row_count_is_non_negative() -> None:
    with pytest.raises(ValidationError):
        MetricsReportResponse(row_count=-1)


def test_report_is_frozen() -> None:
    report = MetricsReportResponse(row_count=0)
    with pytest.raises(ValidationError):
        report.row_count = 3  # type: ignore[misc]
