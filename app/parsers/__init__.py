"""
app/parsers package marker.
"""

from app.parsers.csv_parser import CSVParseError, ParsedCSV, is_csv_upload, parse_csv_bytes

__all__ = [
    "CSVParseError",
    "ParsedCSV",
    "is_csv_upload",
    "parse_csv_bytes",
]
