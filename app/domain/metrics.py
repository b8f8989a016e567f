"""
app/domain/metrics.py

Descriptive statistics value objects.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Metrics:
    """
    Average/min/max triple for one group of records.

    ``average`` is already rounded to two decimals.
    """

    average: float
    minimum: float
    maximum: float

    @property
    def formatted_average(self) -> str:
        return f"{self.average:.2f}"

    def to_dict(self) -> dict[str, float]:
        return {"average": self.average, "min": self.minimum, "max": self.maximum}


@dataclass(frozen=True)
class DatasetMetrics:
    """
    Overall metrics plus one Metrics per distinct name, in first-appearance order.
    """

    overall: Metrics
    per_person: dict[str, Metrics] = field(default_factory=dict)
    row_count: int = 0
