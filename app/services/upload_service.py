"""
app/services/upload_service.py

Service layer for the upload workflow: parse -> validate -> aggregate.

Every call builds a fresh, immutable UploadResult. Nothing is carried over
between uploads, so the caller replaces its previous result wholesale.
Validation problems are returned as UploadFailure values; only unexpected
errors propagate.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from app.config import get_upload_settings
from app.domain.records import UploadErrorKind
from app.domain.upload import UploadFailure, UploadResult, UploadSuccess
from app.logging_utils import log_event
from app.parsers.csv_parser import CSVParseError, is_csv_upload, parse_csv_bytes
from app.services.metrics_aggregator import MetricsAggregator
from app.validators.csv_validator import CSVDatasetValidator

logger = logging.getLogger(__name__)


class MetricsUploadService:
    """
    Coordinates CSV parsing, dataset validation, and metrics aggregation.
    """

    def __init__(
        self,
        *,
        validator: CSVDatasetValidator | None = None,
        aggregator: MetricsAggregator | None = None,
    ) -> None:
        self._validator = validator or CSVDatasetValidator()
        self._aggregator = aggregator or MetricsAggregator()

    def process_upload(
        self,
        *,
        data: bytes,
        filename: str | None = None,
        content_type: str | None = None,
    ) -> UploadResult:
        """
        Run the full pipeline for one uploaded file.

        Args:
            data:          Raw file bytes.
            filename:      Original file name, used for the advisory CSV check
                           and carried on the result for display.
            content_type:  Browser-reported MIME type, advisory only.
        """
        if not is_csv_upload(filename, content_type):
            logger.warning(
                "Upload does not look like CSV filename=%r content_type=%r; parsing anyway",
                filename,
                content_type,
            )

        try:
            parsed = parse_csv_bytes(data)
        except CSVParseError as exc:
            log_event(
                logger,
                logging.WARNING,
                "upload_rejected",
                filename=filename,
                kind=UploadErrorKind.PARSE_ERROR,
            )
            return UploadFailure(
                filename=filename,
                kind=UploadErrorKind.PARSE_ERROR,
                message=str(exc),
            )

        validation = self._validator.validate(parsed.headers, parsed.rows)
        if not validation.is_valid:
            log_event(
                logger,
                logging.WARNING,
                "upload_rejected",
                filename=filename,
                kind=validation.error_kind,
                missing_headers=list(validation.missing_headers) or None,
                row_errors=len(validation.details),
            )
            return UploadFailure(
                filename=filename,
                kind=validation.error_kind or UploadErrorKind.INVALID_ROW_DATA,
                message=validation.error_message or "",
                details=validation.details,
            )

        metrics = self._aggregator.aggregate(validation.records)
        log_event(
            logger,
            logging.INFO,
            "upload_accepted",
            filename=filename,
            rows=len(validation.records),
            people=len(metrics.per_person) if metrics is not None else 0,
        )
        return UploadSuccess(
            filename=filename,
            records=validation.records,
            metrics=metrics,
        )


@lru_cache(maxsize=1)
def get_metrics_upload_service() -> MetricsUploadService:
    """
    Build and cache the upload service with env-driven settings.
    """
    settings = get_upload_settings()
    return MetricsUploadService(
        validator=CSVDatasetValidator(
            max_validation_errors=settings.max_validation_errors,
            log_validation_errors=settings.log_validation_errors,
            collect_all_row_errors=settings.collect_all_row_errors,
        ),
    )


def process_upload(data: bytes, filename: str | None = None) -> UploadResult:
    """
    Process one upload with the cached, settings-driven service.
    """

    return get_metrics_upload_service().process_upload(data=data, filename=filename)
