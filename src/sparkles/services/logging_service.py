"""Logging setup and in-process log capture.

`configure_logging` applies the configured level to the ``sparkles`` logger
namespace. `LoggingService` installs a ring-buffer handler so recent adapter
diagnostics (max value, per-point ratios, bounds) can be inspected or
exported without a console, optionally announcing each record on an
`EventBus`.
"""

from __future__ import annotations

import json
import logging
import os
from collections import deque
from dataclasses import asdict, dataclass
from typing import Deque, List, Optional

from ..config.settings import LIB_TAG, LOG_LEVEL
from .event_bus import EventBus, SparklesEvent

__all__ = ["LogEntry", "LoggingService", "configure_logging"]


def configure_logging(level: int | str | None = None) -> logging.Logger:
    logger = logging.getLogger(LIB_TAG)
    logger.setLevel(level if level is not None else LOG_LEVEL)
    return logger


@dataclass(frozen=True)
class LogEntry:
    level: str
    name: str
    message: str
    created: float
    pathname: str
    lineno: int


class _RingBufferHandler(logging.Handler):
    def __init__(self, svc: "LoggingService") -> None:
        super().__init__()
        self._svc = svc

    def emit(self, record: logging.LogRecord) -> None:
        self._svc._ingest_record(record)


class LoggingService:
    def __init__(
        self, capacity: int = 500, *, event_bus: EventBus | None = None, logger_name: str = LIB_TAG
    ) -> None:
        self._entries: Deque[LogEntry] = deque(maxlen=capacity)
        self._handler = _RingBufferHandler(self)
        self._handler.setLevel(logging.DEBUG)
        self._event_bus = event_bus
        self._logger_name = logger_name
        self._attached = False
        self._prev_level: int | None = None

    # Lifecycle --------------------------------------------------------
    def attach(self) -> None:
        if self._attached:
            return
        logger = logging.getLogger(self._logger_name)
        logger.addHandler(self._handler)
        # Don't miss debug diagnostics while attached
        self._prev_level = logger.level
        if logger.getEffectiveLevel() > logging.DEBUG:
            logger.setLevel(logging.DEBUG)
        self._attached = True

    def detach(self) -> None:
        if not self._attached:
            return
        logger = logging.getLogger(self._logger_name)
        logger.removeHandler(self._handler)
        if self._prev_level is not None:
            logger.setLevel(self._prev_level)
        self._attached = False

    # Internal ingestion -----------------------------------------------
    def _ingest_record(self, record: logging.LogRecord) -> None:
        entry = LogEntry(
            level=record.levelname,
            name=record.name,
            message=record.getMessage(),
            created=record.created,
            pathname=record.pathname,
            lineno=record.lineno,
        )
        self._entries.append(entry)
        if self._event_bus is not None:
            self._event_bus.publish(SparklesEvent.LOG_RECORD_ADDED, source=self, payload=entry)

    # Query ------------------------------------------------------------
    def recent(self, limit: Optional[int] = None) -> List[LogEntry]:
        data = list(self._entries)
        return data[-limit:] if limit is not None else data

    def filter(
        self, *, level: str | None = None, name_contains: str | None = None
    ) -> List[LogEntry]:
        out: List[LogEntry] = []
        for e in self.recent():
            if level and e.level != level:
                continue
            if name_contains and name_contains not in e.name:
                continue
            out.append(e)
        return out

    def clear(self) -> None:
        self._entries.clear()

    def export_jsonl(
        self,
        path: str | None = None,
        *,
        level: str | None = None,
        name_contains: str | None = None,
        append: bool = False,
    ) -> int:
        """Export filtered log entries as JSON Lines.

        Returns number of lines written.
        """
        entries = self.filter(level=level, name_contains=name_contains)
        file_path = path or os.path.join(os.getcwd(), "sparkles-logs.jsonl")
        with open(file_path, "a" if append else "w", encoding="utf-8") as f:
            for e in entries:
                f.write(json.dumps(asdict(e), sort_keys=True) + "\n")
        return len(entries)
