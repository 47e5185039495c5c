"""Sparkline processing services (normalization, bounds, notification, logging)."""

from .bounds import compute_bounds  # noqa: F401
from .event_bus import Event, EventBus, SparklesEvent  # noqa: F401
from .logging_service import LogEntry, LoggingService, configure_logging  # noqa: F401
from .normalizer import (  # noqa: F401
    calculate_percent,
    max_value,
    normalize_baseline,
    normalize_points,
)
from .notifier import CallbackListener, EventBusListener, OnDataChangedListener  # noqa: F401
