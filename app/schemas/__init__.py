"""
app/schemas package marker.
"""

from app.schemas.metrics_report import MetricsReportResponse, MetricsResponse, PersonMetricsResponse

__all__ = [
    "MetricsReportResponse",
    "MetricsResponse",
    "PersonMetricsResponse",
]
