"""
app/services package marker.
"""

from app.services.metrics_aggregator import MetricsAggregator, aggregate
from app.services.upload_service import (
    MetricsUploadService,
    get_metrics_upload_service,
    process_upload,
)

__all__ = [
    "MetricsAggregator",
    "aggregate",
    "MetricsUploadService",
    "get_metrics_upload_service",
    "process_upload",
]
