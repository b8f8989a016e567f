"""
app/domain/records.py

Domain models used by the CSV validation flow.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Mapping

RawRow = Mapping[str, str]


class UploadErrorKind:
    MISSING_HEADERS = "missing_headers"
    INVALID_ROW_DATA = "invalid_row_data"
    PARSE_ERROR = "parse_error"
    UNEXPECTED_ERROR = "unexpected_error"


@dataclass(frozen=True)
class MetricRecord:
    """
    Typed record produced by the validator's coercion step.
    """

    name: str
    date: datetime
    value: float


@dataclass(frozen=True)
class RowValidationError:
    """
    One CSV row validation error detail.
    """

    row_number: int
    message: str
    column: str | None = None
    value: str | None = None


class DatasetValidationError(ValueError):
    """
    Raised when a dataset is rejected by header or row validation.
    """

    def __init__(
        self,
        *,
        kind: str,
        message: str,
        details: tuple[RowValidationError, ...] = (),
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.details = details


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of validating one uploaded dataset.

    Exactly one of ``records`` (valid) or ``error_kind`` (invalid) is
    meaningful. Invalid results never carry records.
    """

    records: tuple[MetricRecord, ...] = ()
    error_kind: str | None = None
    error_message: str | None = None
    missing_headers: tuple[str, ...] = ()
    details: tuple[RowValidationError, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return self.error_kind is None

    @classmethod
    def valid(cls, records: tuple[MetricRecord, ...]) -> "ValidationResult":
        return cls(records=records)

    @classmethod
    def invalid(
        cls,
        *,
        kind: str,
        message: str,
        missing_headers: tuple[str, ...] = (),
        details: tuple[RowValidationError, ...] = (),
    ) -> "ValidationResult":
        return cls(
            error_kind=kind,
            error_message=message,
            missing_headers=missing_headers,
            details=details,
        )

    def raise_for_error(self) -> None:
        """
        Raise DatasetValidationError when the dataset was rejected.
        """

        if self.error_kind is not None:
            raise DatasetValidationError(
                kind=self.error_kind,
                message=self.error_message or "",
                details=self.details,
            )
