"""Sparkles public API.

Curated surface for view code: the adapter, its data models and the
listener helpers. The PyQt6 bridge lives in `sparkles.qt` and is not
imported here so headless callers never load Qt.
"""

from __future__ import annotations

from .adapter import DataPointIndexError, SparklesAdapter  # noqa: F401
from .model import DataBounds, GraphPoint, SparklesDataPoint  # noqa: F401
from .services.event_bus import Event, EventBus, SparklesEvent  # noqa: F401
from .services.notifier import (  # noqa: F401
    CallbackListener,
    EventBusListener,
    OnDataChangedListener,
)

__version__ = "0.1.0"
