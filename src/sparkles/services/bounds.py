"""Bounding rectangle computation for normalized sparkline data."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Tuple

from ..config.settings import VERTICAL_BOUND_OFFSET
from ..model import DataBounds

__all__ = ["compute_bounds"]

log = logging.getLogger(__name__)


def _lower(current: Optional[float], value: float) -> float:
    return value if current is None else min(current, value)


def _upper(current: Optional[float], value: float) -> float:
    return value if current is None else max(current, value)


def compute_bounds(
    points: Iterable[Tuple[float, float]],
    baseline_y: Optional[float] = None,
    vertical_offset: float = VERTICAL_BOUND_OFFSET,
) -> DataBounds:
    """Return the min/max of the graph points, padded vertically.

    Parameters
    ----------
    points:
        ``(x, y)`` graph coordinates in index order.
    baseline_y:
        Graph Y of the baseline; seeds the vertical range when given.
    vertical_offset:
        Subtracted from the minimum Y and added to the maximum Y.

    Empty ranges resolve to 0.0 so callers always get finite numbers.
    """
    min_y: Optional[float] = baseline_y
    max_y: Optional[float] = baseline_y
    min_x: Optional[float] = None
    max_x: Optional[float] = None

    for x, y in points:
        min_x = _lower(min_x, x)
        max_x = _upper(max_x, x)
        min_y = _lower(min_y, y)
        max_y = _upper(max_y, y)

    log.debug("Rect Dimens: minX: %s, minY: %s, maxX: %s, maxY: %s", min_x, min_y, max_x, max_y)

    return DataBounds(
        min_x=min_x if min_x is not None else 0.0,
        min_y=(min_y if min_y is not None else 0.0) - vertical_offset,
        max_x=max_x if max_x is not None else 0.0,
        max_y=(max_y if max_y is not None else 0.0) + vertical_offset,
    )
