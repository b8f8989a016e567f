"""
app/validators/csv_validator.py

Header and row-level validation for uploaded metric datasets.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Sequence

from app.domain.records import (
    MetricRecord,
    RawRow,
    RowValidationError,
    UploadErrorKind,
    ValidationResult,
)

logger = logging.getLogger(__name__)

REQUIRED_HEADERS: tuple[str, ...] = ("name", "date", "value")

TIMESTAMP_FORMATS: tuple[str, ...] = (
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%Y-%m-%d %H:%M:%S",
    "%Y/%m/%d %H:%M:%S",
)

INVALID_ROW_DATA_MESSAGE = (
    "Invalid data type: 'value' must be numeric and 'date' must be a valid date, "
    "with a non-empty 'name' on every row."
)


def find_missing_headers(headers: Sequence[str]) -> tuple[str, ...]:
    """
    Return required headers absent from *headers*, in required order.
    """

    present = set(headers)
    return tuple(header for header in REQUIRED_HEADERS if header not in present)


def missing_headers_message(missing: Sequence[str]) -> str:
    return f"Missing required headers: {', '.join(missing)}"


class CSVDatasetValidator:
    """
    Validates a parsed upload and coerces accepted rows into MetricRecords.

    The dataset is accepted or rejected as a whole. By default the row scan
    stops at the first invalid row.
    """

    def __init__(
        self,
        *,
        max_validation_errors: int = 50,
        log_validation_errors: bool = True,
        collect_all_row_errors: bool = False,
    ) -> None:
        self._max_validation_errors = max(1, max_validation_errors)
        self._log_validation_errors = log_validation_errors
        self._collect_all_row_errors = collect_all_row_errors

    def validate(
        self,
        headers: Sequence[str],
        rows: Sequence[RawRow],
    ) -> ValidationResult:
        """
        Check required headers, then every row's name/value/date.
        """

        missing = find_missing_headers(headers)
        if missing:
            message = missing_headers_message(missing)
            logger.warning("CSV header validation failed missing=%s", list(missing))
            return ValidationResult.invalid(
                kind=UploadErrorKind.MISSING_HEADERS,
                message=message,
                missing_headers=missing,
            )

        records: list[MetricRecord] = []
        captured_errors: list[RowValidationError] = []
        rows_failed = 0

        # Header is row 1.
        for row_number, row in enumerate(rows, start=2):
            record, row_errors = self.validate_row(row=row, row_number=row_number)
            if row_errors:
                rows_failed += 1
                for error in row_errors:
                    self._record_error(captured_errors, error)
                if not self._collect_all_row_errors:
                    break
                continue
            if record is not None:
                records.append(record)

        if rows_failed:
            logger.warning(
                "CSV row validation failed rows_failed=%d errors_captured=%d",
                rows_failed,
                len(captured_errors),
            )
            return ValidationResult.invalid(
                kind=UploadErrorKind.INVALID_ROW_DATA,
                message=INVALID_ROW_DATA_MESSAGE,
                details=tuple(captured_errors),
            )

        return ValidationResult.valid(tuple(records))

    def validate_row(
        self,
        *,
        row: RawRow,
        row_number: int,
    ) -> tuple[MetricRecord | None, list[RowValidationError]]:
        """
        Validate and coerce one raw row.
        """

        errors: list[RowValidationError] = []

        name = self._parse_name(
            value=row.get("name"),
            row_number=row_number,
            errors=errors,
        )
        value = self._parse_value(
            value=row.get("value"),
            row_number=row_number,
            errors=errors,
        )
        date = self._parse_date(
            value=row.get("date"),
            row_number=row_number,
            errors=errors,
        )

        if errors:
            return None, errors
        return MetricRecord(name=name, date=date, value=value), []

    def _parse_name(
        self,
        *,
        value: Any,
        row_number: int,
        errors: list[RowValidationError],
    ) -> str:
        # Only absent or empty names are rejected; whitespace is a valid name.
        if value is None or str(value) == "":
            errors.append(
                RowValidationError(
                    row_number=row_number,
                    column="name",
                    message="Required value is missing.",
                    value=self._stringify_value(value),
                )
            )
            return ""
        # Grouping is exact: the name is kept untrimmed.
        return str(value)

    def _parse_value(
        self,
        *,
        value: Any,
        row_number: int,
        errors: list[RowValidationError],
    ) -> float:
        if self._is_blank(value):
            errors.append(
                RowValidationError(
                    row_number=row_number,
                    column="value",
                    message="Required value is missing.",
                    value=self._stringify_value(value),
                )
            )
            return math.nan

        raw_value = str(value).strip()
        # Decimal accepts digit-grouping underscores; plain numbers never contain them.
        if "_" in raw_value:
            decimal_value = None
        else:
            try:
                decimal_value = Decimal(raw_value)
            except InvalidOperation:
                decimal_value = None

        if decimal_value is None or not decimal_value.is_finite():
            errors.append(
                RowValidationError(
                    row_number=row_number,
                    column="value",
                    message="value must be a finite number.",
                    value=raw_value,
                )
            )
            return math.nan

        parsed = float(decimal_value)
        if not math.isfinite(parsed):
            errors.append(
                RowValidationError(
                    row_number=row_number,
                    column="value",
                    message="value is out of range.",
                    value=raw_value,
                )
            )
            return math.nan
        return parsed

    def _parse_date(
        self,
        *,
        value: Any,
        row_number: int,
        errors: list[RowValidationError],
    ) -> datetime:
        if self._is_blank(value):
            errors.append(
                RowValidationError(
                    row_number=row_number,
                    column="date",
                    message="Required value is missing.",
                    value=self._stringify_value(value),
                )
            )
            return datetime.min

        raw = str(value).strip()

        normalized = raw[:-1] + "+00:00" if raw.endswith("Z") else raw
        try:
            parsed = datetime.fromisoformat(normalized)
            if parsed.tzinfo is None:
                parsed = parsed.replace(tzinfo=timezone.utc)
            return parsed
        except ValueError:
            pass

        for fmt in TIMESTAMP_FORMATS:
            try:
                parsed = datetime.strptime(raw, fmt)
                return parsed.replace(tzinfo=timezone.utc)
            except ValueError:
                continue

        errors.append(
            RowValidationError(
                row_number=row_number,
                column="date",
                message="Invalid date/time format.",
                value=raw,
            )
        )
        return datetime.min

    def _record_error(
        self,
        captured_errors: list[RowValidationError],
        error: RowValidationError,
    ) -> None:
        if self._log_validation_errors:
            logger.warning(
                "CSV validation error row=%s column=%s message=%s value=%r",
                error.row_number,
                error.column,
                error.message,
                error.value,
            )

        if len(captured_errors) < self._max_validation_errors:
            captured_errors.append(error)

    @staticmethod
    def _is_blank(value: Any) -> bool:
        if value is None:
            return True
        return str(value).strip() == ""

    @staticmethod
    def _stringify_value(value: Any) -> str | None:
        if value is None:
            return None
        return str(value)


def validate(headers: Sequence[str], rows: Sequence[RawRow]) -> ValidationResult:
    """
    Validate with default settings (first-failure row scan).
    """

    return CSVDatasetValidator().validate(headers, rows)
