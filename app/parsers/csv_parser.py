"""
app/parsers/csv_parser.py

Tokenizes uploaded CSV bytes into a header list and string-typed rows.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field

import pandas as pd

from app.domain.records import RawRow

logger = logging.getLogger(__name__)

CSV_CONTENT_TYPES = {
    "text/csv",
    "application/csv",
    "application/vnd.ms-excel",
}


class CSVParseError(ValueError):
    """
    Raised when the tokenizer cannot read the uploaded bytes as CSV.
    """


@dataclass(frozen=True)
class ParsedCSV:
    """
    Header row plus every non-blank data row as a column -> string mapping.
    """

    headers: tuple[str, ...]
    rows: tuple[RawRow, ...] = field(default_factory=tuple)


def is_csv_upload(filename: str | None, content_type: str | None = None) -> bool:
    """
    Return True when the upload looks like a CSV by extension or MIME type.

    Advisory only; callers log a mismatch and still parse the file.
    """

    normalized_name = (filename or "").strip().lower()
    normalized_type = (content_type or "").strip().lower()
    return normalized_name.endswith(".csv") or normalized_type in CSV_CONTENT_TYPES


def parse_csv_bytes(data: bytes) -> ParsedCSV:
    """
    Parse raw upload bytes without any type coercion.

    Every cell is kept as text; missing trailing cells become "", a single
    extra trailing cell is dropped and completely empty lines are skipped.
    """

    try:
        frame = pd.read_csv(
            io.BytesIO(data),
            dtype=str,
            index_col=False,
            keep_default_na=False,
            skip_blank_lines=True,
            encoding="utf-8-sig",
        )
    except pd.errors.EmptyDataError as exc:
        raise CSVParseError(f"Could not parse CSV: {exc}") from exc
    except pd.errors.ParserError as exc:
        raise CSVParseError(f"Could not parse CSV: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise CSVParseError("Could not parse CSV: file must be UTF-8 encoded.") from exc

    frame = frame.fillna("")
    headers = tuple(str(column) for column in frame.columns)
    rows = tuple(
        {str(key): str(value) for key, value in record.items()}
        for record in frame.to_dict(orient="records")
    )
    logger.debug("Parsed CSV headers=%s rows=%d", headers, len(rows))
    return ParsedCSV(headers=headers, rows=rows)
