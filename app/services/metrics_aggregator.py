"""
app/services/metrics_aggregator.py

Overall and per-person descriptive statistics for validated records.

Rounding
--------
Averages are rounded to two decimals with round-half-away-from-zero,
applied to the shortest decimal representation of the float mean
(``repr``), so ``11.665`` becomes ``11.67`` rather than following the
binary expansion. ``min`` and ``max`` are returned unrounded.

No I/O and no hidden state: the same input always yields the same output.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Iterable, Sequence

from app.domain.metrics import DatasetMetrics, Metrics
from app.domain.records import MetricRecord

_TWO_PLACES = Decimal("0.01")


def round_half_away_from_zero(value: float, places: Decimal = _TWO_PLACES) -> float:
    """
    Round *value* to *places* using half-away-from-zero.
    """

    decimal_value = Decimal(repr(value))
    # quantize needs every integer digit plus the fractional places in precision.
    with localcontext() as context:
        context.prec = max(context.prec, decimal_value.adjusted() - places.as_tuple().exponent + 2)
        # ROUND_HALF_UP rounds ties away from zero for both signs.
        return float(decimal_value.quantize(places, rounding=ROUND_HALF_UP))


def compute_metrics(values: Sequence[float]) -> Metrics:
    """
    Compute the average/min/max triple for a non-empty *values* sequence.
    """

    if not values:
        raise ValueError("compute_metrics requires at least one value.")

    count = len(values)
    # fsum is exactly rounded, so the mean does not depend on row order.
    try:
        mean = math.fsum(values) / count
    except OverflowError:
        mean = math.fsum(value / count for value in values)
    return Metrics(
        average=round_half_away_from_zero(mean),
        minimum=min(values),
        maximum=max(values),
    )


def group_values_by_name(records: Iterable[MetricRecord]) -> dict[str, list[float]]:
    """
    Partition record values by exact name, preserving first appearance.
    """

    grouped: dict[str, list[float]] = {}
    for record in records:
        grouped.setdefault(record.name, []).append(float(record.value))
    return grouped


class MetricsAggregator:
    """
    Reduces a validated record set to overall and per-person Metrics.
    """

    def aggregate(self, records: Sequence[MetricRecord]) -> DatasetMetrics | None:
        """
        Return DatasetMetrics, or None when *records* is empty.
        """

        if not records:
            return None

        values = [float(record.value) for record in records]
        per_person = {
            name: compute_metrics(group)
            for name, group in group_values_by_name(records).items()
        }
        return DatasetMetrics(
            overall=compute_metrics(values),
            per_person=per_person,
            row_count=len(values),
        )


def aggregate(records: Sequence[MetricRecord]) -> DatasetMetrics | None:
    return MetricsAggregator().aggregate(records)
