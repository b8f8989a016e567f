"""
app/presenters/metrics_presenter.py

Maps computed metrics to table, chart and export shapes for the UI.
"""

from __future__ import annotations

import io
import json

import pandas as pd

from app.domain.metrics import DatasetMetrics, Metrics
from app.domain.upload import UploadSuccess
from app.schemas.metrics_report import (
    MetricsReportResponse,
    MetricsResponse,
    PersonMetricsResponse,
)

TABLE_COLUMNS: list[str] = ["name", "average", "min", "max"]


def build_metrics_table(metrics: DatasetMetrics) -> pd.DataFrame:
    """One row per person: name, average, min, max."""
    rows = [
        {"name": name, **person_metrics.to_dict()}
        for name, person_metrics in metrics.per_person.items()
    ]
    return pd.DataFrame(rows, columns=TABLE_COLUMNS)


def build_chart_series(metrics: DatasetMetrics) -> pd.DataFrame:
    """Bar chart data: index is the name, bar height is that person's average."""
    return pd.DataFrame(
        {"average": [person.average for person in metrics.per_person.values()]},
        index=pd.Index(list(metrics.per_person.keys()), name="name"),
    )


def build_overall_summary(metrics: DatasetMetrics) -> dict[str, str]:
    """Formatted strings for the overall metric cards."""
    overall = metrics.overall
    return {
        "average": overall.formatted_average,
        "min": _format_number(overall.minimum),
        "max": _format_number(overall.maximum),
    }


def _format_number(value: float) -> str:
    return str(int(value)) if value.is_integer() else str(value)


def _to_response(metrics: Metrics) -> MetricsResponse:
    return MetricsResponse(average=metrics.average, min=metrics.minimum, max=metrics.maximum)


def build_report(result: UploadSuccess) -> MetricsReportResponse:
    """
    Build the export model for an accepted upload.
    """

    metrics = result.metrics
    if metrics is None:
        return MetricsReportResponse(filename=result.filename, row_count=0)

    return MetricsReportResponse(
        filename=result.filename,
        row_count=metrics.row_count,
        overall=_to_response(metrics.overall),
        per_person=[
            PersonMetricsResponse(
                name=name,
                average=person.average,
                min=person.minimum,
                max=person.maximum,
            )
            for name, person in metrics.per_person.items()
        ],
    )


def export_report_json(result: UploadSuccess) -> bytes:
    payload = build_report(result).model_dump(by_alias=True)
    return json.dumps(payload, indent=2).encode("utf-8")


def export_table_csv(metrics: DatasetMetrics) -> bytes:
    frame = build_metrics_table(metrics)
    frame["average"] = frame["average"].map("{:.2f}".format)
    buffer = io.StringIO()
    frame.to_csv(buffer, index=False)
    return buffer.getvalue().encode("utf-8")
