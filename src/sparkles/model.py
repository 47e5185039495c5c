"""Sparkline data models.

`SparklesDataPoint` is what callers hand to the adapter; `GraphPoint` and
`DataBounds` are derived plot-space values the view reads back.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

__all__ = ["Number", "GraphPoint", "SparklesDataPoint", "DataBounds"]

Number = Union[int, float]


@dataclass(frozen=True)
class GraphPoint:
    x: float
    y: float


@dataclass
class SparklesDataPoint:
    """One sample of the series.

    Attributes:
        input_value: Raw user value; ``None`` marks a missing sample.
        graph_value: Plot coordinate computed by the adapter (never user supplied).
    """

    input_value: Optional[Number] = None
    graph_value: Optional[GraphPoint] = None

    @property
    def is_empty_value(self) -> bool:
        return self.input_value is None


@dataclass(frozen=True)
class DataBounds:
    """Rectangle enclosing the graph points (plus vertical padding).

    Naming follows a RectF: ``left``/``right`` span X, ``top`` is the minimum Y
    and ``bottom`` the maximum Y.
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def left(self) -> float:
        return self.min_x

    @property
    def top(self) -> float:
        return self.min_y

    @property
    def right(self) -> float:
        return self.max_x

    @property
    def bottom(self) -> float:
        return self.max_y

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.min_x, self.min_y, self.max_x, self.max_y)
