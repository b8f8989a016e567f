"""
app/domain/upload.py

Result of processing one uploaded file.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from app.domain.metrics import DatasetMetrics
from app.domain.records import MetricRecord, RowValidationError


@dataclass(frozen=True)
class UploadSuccess:
    """
    Accepted dataset. ``metrics`` is None when the file has no data rows.
    """

    filename: str | None
    records: tuple[MetricRecord, ...]
    metrics: DatasetMetrics | None

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class UploadFailure:
    """
    Rejected upload with a single human-readable message.
    """

    filename: str | None
    kind: str
    message: str
    details: tuple[RowValidationError, ...] = ()

    @property
    def ok(self) -> bool:
        return False


UploadResult = Union[UploadSuccess, UploadFailure]
