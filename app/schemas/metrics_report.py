"""
app/schemas/metrics_report.py

Export schemas for computed upload metrics.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class MetricsResponse(BaseModel):
    """
    Average/min/max triple as exported to JSON.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    average: float
    minimum: float = Field(alias="min")
    maximum: float = Field(alias="max")


class PersonMetricsResponse(MetricsResponse):
    """
    Metrics for one distinct name.
    """

    name: str = Field(min_length=1)


class MetricsReportResponse(BaseModel):
    """
    Full export of one accepted upload.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    filename: str | None = None
    row_count: int = Field(..., ge=0)
    overall: MetricsResponse | None = None
    per_person: list[PersonMetricsResponse] = Field(default_factory=list)
