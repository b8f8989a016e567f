"""
app/domain package marker.
"""

from app.domain.metrics import DatasetMetrics, Metrics
from app.domain.records import (
    DatasetValidationError,
    MetricRecord,
    RowValidationError,
    UploadErrorKind,
    ValidationResult,
)
from app.domain.upload import UploadFailure, UploadResult, UploadSuccess

__all__ = [
    "DatasetMetrics",
    "DatasetValidationError",
    "MetricRecord",
    "Metrics",
    "RowValidationError",
    "UploadErrorKind",
    "UploadFailure",
    "UploadResult",
    "UploadSuccess",
    "ValidationResult",
]
