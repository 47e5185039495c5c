"""Synchronous fan-out of sparkline notifications.

One adapter has a single listener slot; `EventBusListener` fills that slot and
republishes here so any number of views (legend, tooltip, thumbnail) can follow
the same adapter. Each `Event` carries the object that raised it.

A failing handler never reaches the adapter: the failure is logged and kept
in a bounded `errors` buffer, and the remaining handlers still run.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from time import perf_counter
from typing import Any, Callable, Deque, Dict, List, Tuple

__all__ = ["SparklesEvent", "Event", "EventBus", "Handler", "Unsubscribe"]

log = logging.getLogger(__name__)


class SparklesEvent(str, Enum):
    DATA_CHANGED = "data_changed"
    DATA_INVALIDATED = "data_invalidated"
    LOG_RECORD_ADDED = "log_record_added"


@dataclass(frozen=True)
class Event:
    kind: SparklesEvent
    source: Any = None
    payload: Any = None
    timestamp: float = field(default_factory=perf_counter)


Handler = Callable[[Event], None]
Unsubscribe = Callable[[], None]


class EventBus:
    DEFAULT_ERROR_CAPACITY = 20

    def __init__(self, *, error_capacity: int = DEFAULT_ERROR_CAPACITY) -> None:
        self._handlers: Dict[SparklesEvent, List[Handler]] = {}
        self._errors: Deque[Tuple[Event, Exception]] = deque(maxlen=max(1, error_capacity))
        self._reporting = False

    def subscribe(self, kind: SparklesEvent, handler: Handler) -> Unsubscribe:
        """Register ``handler`` for ``kind``; call the returned function to detach it."""
        self._handlers.setdefault(kind, []).append(handler)

        def unsubscribe() -> None:
            handlers = self._handlers.get(kind, [])
            if handler in handlers:
                handlers.remove(handler)

        return unsubscribe

    def publish(self, kind: SparklesEvent, source: Any = None, payload: Any = None) -> Event:
        evt = Event(kind=kind, source=source, payload=payload)
        # Snapshot so handlers may unsubscribe while being dispatched
        for handler in list(self._handlers.get(kind, ())):
            try:
                handler(evt)
            except Exception as exc:  # noqa: BLE001 - a view must not break the adapter
                self._errors.append((evt, exc))
                self._report(evt, exc)
        return evt

    def _report(self, evt: Event, exc: Exception) -> None:
        # A failing LOG_RECORD_ADDED handler would otherwise re-enter through the log capture
        if self._reporting:
            return
        self._reporting = True
        try:
            log.warning("Handler for %s failed: %r", evt.kind.value, exc, exc_info=exc)
        finally:
            self._reporting = False

    def subscriber_count(self, kind: SparklesEvent) -> int:
        return len(self._handlers.get(kind, ()))

    @property
    def errors(self) -> List[Tuple[Event, Exception]]:
        return list(self._errors)

    def clear_errors(self) -> None:
        self._errors.clear()
