"""Sparkline adapter.

Holds and processes the user input data and notifies the view about any
updates in the data set. The view only reads through the accessors
(`count`, `graph_x`, `graph_y`, `graph_baseline`, `bounds`, ...) and never
touches the stored points directly.
"""

from __future__ import annotations

import logging
import numbers
from dataclasses import replace
from typing import Iterable, List, Optional, Union, cast

from .config.settings import VERTICAL_BOUND_OFFSET
from .model import DataBounds, GraphPoint, Number, SparklesDataPoint
from .services.bounds import compute_bounds
from .services.normalizer import max_value, normalize_baseline, normalize_points
from .services.notifier import OnDataChangedListener

__all__ = ["SparklesAdapter", "DataPointIndexError", "PointInput"]

log = logging.getLogger(__name__)

PointInput = Union[SparklesDataPoint, Number, None]


class DataPointIndexError(IndexError):
    """Raised when a per-point accessor is given an index outside the dataset."""

    def __init__(self, index: int, count: int) -> None:
        super().__init__(f"Data point index {index} out of range (count={count})")
        self.index = index
        self.count = count


def _as_point(value: PointInput) -> SparklesDataPoint:
    # Copy so graph values computed here never leak into caller-owned objects
    if isinstance(value, SparklesDataPoint):
        return replace(value, graph_value=None)
    if value is None or isinstance(value, numbers.Real):
        return SparklesDataPoint(value)
    raise TypeError(f"Unsupported data point type: {type(value).__name__}")


class SparklesAdapter:
    def __init__(self, *, vertical_bound_offset: float = VERTICAL_BOUND_OFFSET) -> None:
        self._points: List[SparklesDataPoint] = []
        self._baseline = SparklesDataPoint(None)
        self._listener: Optional[OnDataChangedListener] = None
        self.vertical_bound_offset = vertical_bound_offset

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------
    def set_input(self, points: Iterable[PointInput], baseline: PointInput = None) -> None:
        """Replace the dataset, recompute graph values and notify the listener.

        Nothing is stored until every point and the baseline are accepted, so a
        ``TypeError`` leaves the previous dataset untouched.
        """
        new_points = [_as_point(p) for p in points]
        new_baseline = _as_point(baseline)
        max_val = max_value(new_points)
        log.debug("Final Max Value: %s", max_val)
        normalize_points(new_points, max_val)
        normalize_baseline(new_baseline, max_val)
        self._points = new_points
        self._baseline = new_baseline
        self.notify_data_set_changed()

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    def count(self) -> int:
        return len(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def _point(self, index: int) -> SparklesDataPoint:
        if not 0 <= index < len(self._points):
            raise DataPointIndexError(index, len(self._points))
        return self._points[index]

    def _graph_point(self, index: int) -> GraphPoint:
        # set_input normalizes every point before storing it
        return cast(GraphPoint, self._point(index).graph_value)

    def is_empty_value(self, index: int) -> bool:
        return self._point(index).is_empty_value

    def graph_x(self, index: int) -> float:
        """X of the point at ``index`` in graph space (its index)."""
        return self._graph_point(index).x

    def graph_y(self, index: int) -> float:
        """Y of the point at ``index`` in graph space (ratio to the max value)."""
        return self._graph_point(index).y

    def graph_baseline(self) -> Optional[float]:
        """Graph Y of the baseline, or ``None`` when no baseline value was given."""
        gv = self._baseline.graph_value
        return gv.y if gv is not None else None

    def has_baseline(self) -> bool:
        return self._baseline.graph_value is not None

    def bounds(self) -> DataBounds:
        """Bounds of the whole dataset, recomputed on every call.

        Subclasses may override for custom framing; keep ``min_x``/``max_x``
        spanning X and ``min_y``/``max_y`` spanning Y.
        """
        coords = [(self.graph_x(i), self.graph_y(i)) for i in range(self.count())]
        return compute_bounds(coords, self.graph_baseline(), self.vertical_bound_offset)

    # ------------------------------------------------------------------
    # Notification
    # ------------------------------------------------------------------
    def set_listener(self, listener: Optional[OnDataChangedListener]) -> None:
        """Install the listener notified about data changes, replacing any previous one."""
        self._listener = listener

    def notify_data_set_changed(self) -> None:
        if self._listener is not None:
            self._listener.on_data_changed()

    def notify_data_set_invalidated(self) -> None:
        if self._listener is not None:
            self._listener.on_data_invalidated()
