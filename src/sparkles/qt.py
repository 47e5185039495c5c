"""PyQt6 bridge for sparkline adapter notifications.

`QtSparklesListener` fills the adapter's listener slot and re-emits the two
notifications as Qt signals, so a widget can connect ``update`` (or a repaint
slot) without implementing the listener protocol itself.

Usage:
    bridge = QtSparklesListener()
    bridge.bind(adapter)
    bridge.dataChanged.connect(widget.update)
"""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal

from .adapter import SparklesAdapter

__all__ = ["QtSparklesListener"]


class QtSparklesListener(QObject):
    dataChanged = pyqtSignal()
    dataInvalidated = pyqtSignal()

    def bind(self, adapter: SparklesAdapter) -> "QtSparklesListener":
        adapter.set_listener(self)
        return self

    def on_data_changed(self) -> None:
        self.dataChanged.emit()

    def on_data_invalidated(self) -> None:
        self.dataInvalidated.emit()
