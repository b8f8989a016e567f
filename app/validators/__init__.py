"""
app/validators package marker.
"""

from app.validators.csv_validator import REQUIRED_HEADERS, CSVDatasetValidator, validate

__all__ = [
    "CSVDatasetValidator",
    "REQUIRED_HEADERS",
    "validate",
]
