"""Normalization of raw sparkline samples into graph space.

Pure functions operating on a list of `SparklesDataPoint`:

 - X is the index of the sample.
 - Y is the ratio ``value / max_value`` (a plain ratio, not multiplied by 100).
 - Missing samples carry the last computed ratio forward (flat line),
   starting from 0.0 when the series opens with gaps.

Degenerate inputs never raise: a zero or undefined maximum yields 0.0.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..model import GraphPoint, Number, SparklesDataPoint

__all__ = ["max_value", "calculate_percent", "normalize_points", "normalize_baseline"]

log = logging.getLogger(__name__)


def max_value(points: Sequence[SparklesDataPoint]) -> Optional[float]:
    """Return the largest present input value, or ``None`` if every sample is missing."""
    present = [float(p.input_value) for p in points if p.input_value is not None]
    if not present:
        return None
    return max(present)


def calculate_percent(value: Number, max_val: Optional[float]) -> float:
    if not max_val:  # None or 0 -> no meaningful scale
        return 0.0
    return float(value) / max_val


def normalize_points(points: Sequence[SparklesDataPoint], max_val: Optional[float]) -> None:
    """Assign ``graph_value`` to every point in place."""
    last_good_value = 0.0
    for i, point in enumerate(points):
        if not point.is_empty_value:
            last_good_value = calculate_percent(point.input_value, max_val)  # type: ignore[arg-type]
        log.debug("Point at %d : %s, isMissing: %s", i, last_good_value, point.is_empty_value)
        point.graph_value = GraphPoint(float(i), last_good_value)


def normalize_baseline(baseline: SparklesDataPoint, max_val: Optional[float]) -> None:
    if baseline.input_value is None:
        baseline.graph_value = None
    else:
        baseline.graph_value = GraphPoint(0.0, calculate_percent(baseline.input_value, max_val))
    log.debug("Calculated Graph Baseline: %s", baseline.graph_value)
