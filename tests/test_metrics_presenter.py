"""
tests/test_metrics_presenter.py

Table, chart and export shapes built from computed metrics.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest

from app.domain.metrics import DatasetMetrics, Metrics
from app.domain.records import MetricRecord
from app.domain.upload import UploadSuccess
from app.presenters.metrics_presenter import (
    TABLE_COLUMNS,
    build_chart_series,
    build_metrics_table,
    build_overall_summary,
    build_report,
    export_report_json,
    export_table_csv,
)


@pytest.fixture()
def metrics() -> DatasetMetrics:
    return DatasetMetrics(
        overall=Metrics(average=11.67, minimum=5.0, maximum=20.0),
        per_person={
            "A": Metrics(average=15.0, minimum=10.0, maximum=20.0),
            "B": Metrics(average=5.0, minimum=5.0, maximum=5.0),
        },
        row_count=3,
    )


@pytest.fixture()
def success(metrics: DatasetMetrics) -> UploadSuccess:
    date = datetime(2024, 1, 1, tzinfo=timezone.utc)
    return UploadSuccess(
        filename="people.csv",
        records=(
            MetricRecord(name="A", date=date, value=10.0),
            MetricRecord(name="A", date=date, value=20.0),
            MetricRecord(name="B", date=date, value=5.0),
        ),
        metrics=metrics,
    )


def test_table_has_one_row_per_person(metrics: DatasetMetrics) -> None:
    table = build_metrics_table(metrics)

    assert list(table.columns) == TABLE_COLUMNS
    assert table.to_dict(orient="records") == [
        {"name": "A", "average": 15.0, "min": 10.0, "max": 20.0},
        {"name": "B", "average": 5.0, "min": 5.0, "max": 5.0},
    ]


def test_chart_series_uses_average_as_bar_height(metrics: DatasetMetrics) -> None:
    chart = build_chart_series(metrics)

    assert list(chart.index) == ["A", "B"]
    assert chart.index.name == "name"
    assert chart["average"].tolist() == [15.0, 5.0]


def test_overall_summary_formatting(metrics: DatasetMetrics) -> None:
    assert build_overall_summary(metrics) == {"average": "11.67", "min": "5", "max": "20"}


def test_overall_summary_keeps_fractional_extremes() -> None:
    metrics = DatasetMetrics(overall=Metrics(average=1.5, minimum=0.25, maximum=2.75), row_count=2)
    assert build_overall_summary(metrics) == {"average": "1.50", "min": "0.25", "max": "2.75"}


def test_report_json_uses_min_max_keys(success: UploadSuccess) -> None:
    payload = json.loads(export_report_json(success))

    assert payload["filename"] == "people.csv"
    assert payload["row_count"] == 3
    assert payload["overall"] == {"average": 11.67, "min": 5.0, "max": 20.0}
    assert payload["per_person"][0] == {"average": 15.0, "min": 10.0, "max": 20.0, "name": "A"}


def test_report_for_empty_dataset() -> None:
    report = build_report(UploadSuccess(filename="empty.csv", records=(), metrics=None))

    assert report.row_count == 0
    assert report.overall is None
    assert report.per_person == []


def test_table_csv_formats_average(metrics: DatasetMetrics) -> None:
    lines = export_table_csv(metrics).decode("utf-8").splitlines()

    assert lines[0] == "name,average,min,max"
    assert lines[1] == "A,15.00,10.0,20.0"
    assert lines[2] == "B,5.00,5.0,5.0"
