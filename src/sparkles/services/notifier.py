"""Change notification hooks for the sparkline adapter.

The adapter holds a single listener slot. Anything with ``on_data_changed``
and ``on_data_invalidated`` methods can fill it; the helpers below cover the
two common cases of plain callables and event-bus fan-out.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Protocol, runtime_checkable

from .event_bus import EventBus, SparklesEvent

__all__ = ["OnDataChangedListener", "CallbackListener", "EventBusListener"]


@runtime_checkable
class OnDataChangedListener(Protocol):
    def on_data_changed(self) -> None: ...  # pragma: no cover - structural

    def on_data_invalidated(self) -> None: ...  # pragma: no cover - structural


class CallbackListener:
    """Wrap one or two callables as a listener. Missing callbacks are skipped."""

    def __init__(
        self,
        on_changed: Optional[Callable[[], None]] = None,
        on_invalidated: Optional[Callable[[], None]] = None,
    ) -> None:
        self._on_changed = on_changed
        self._on_invalidated = on_invalidated

    def on_data_changed(self) -> None:
        if self._on_changed is not None:
            self._on_changed()

    def on_data_invalidated(self) -> None:
        if self._on_invalidated is not None:
            self._on_invalidated()


class EventBusListener:
    """Publish adapter notifications on an `EventBus`.

    Each event carries ``source`` (typically the adapter) so
    subscribers serving several sparklines can tell them apart.
    """

    def __init__(self, bus: EventBus, source: Any = None) -> None:
        self.bus = bus
        self.source = source

    def on_data_changed(self) -> None:
        self.bus.publish(SparklesEvent.DATA_CHANGED, self.source)

    def on_data_invalidated(self) -> None:
        self.bus.publish(SparklesEvent.DATA_INVALIDATED, self.source)
