import json
import logging

import pytest

from sparkles import SparklesAdapter
from sparkles.services.event_bus import EventBus, SparklesEvent
from sparkles.services.logging_service import LoggingService, configure_logging


@pytest.fixture()
def capture():
    bus = EventBus()
    svc = LoggingService(capacity=50, event_bus=bus)
    svc.attach()
    yield svc, bus
    svc.detach()


def test_adapter_diagnostics_captured(capture):
    svc, _ = capture
    SparklesAdapter().set_input([5, None, 10])
    messages = [e.message for e in svc.recent()]
    assert "Final Max Value: 10.0" in messages
    assert any(m.startswith("Point at 1 : 0.5, isMissing: True") for m in messages)


def test_bounds_logged(capture):
    svc, _ = capture
    adapter = SparklesAdapter()
    adapter.set_input([1])
    svc.clear()
    adapter.bounds()
    assert [e.name for e in svc.recent()] == ["sparkles.services.bounds"]


def test_capacity_and_filter():
    svc = LoggingService(capacity=3)
    svc.attach()
    try:
        log = logging.getLogger("sparkles.test")
        for i in range(5):
            log.info("M%d", i)
        log.warning("careful")
        assert [e.message for e in svc.recent()] == ["M3", "M4", "careful"]
        assert [e.message for e in svc.filter(level="WARNING")] == ["careful"]
        assert svc.filter(name_contains="nothing") == []
        assert len(svc.recent(limit=1)) == 1
    finally:
        svc.detach()


def test_event_emission(capture):
    svc, bus = capture
    seen = []
    bus.subscribe(SparklesEvent.LOG_RECORD_ADDED, seen.append)
    logging.getLogger("sparkles.test").info("hello")
    assert len(seen) == 1
    assert seen[0].source is svc
    assert (seen[0].payload.level, seen[0].payload.name, seen[0].payload.message) == (
        "INFO",
        "sparkles.test",
        "hello",
    )


def test_export_jsonl(capture, tmp_path):
    svc, _ = capture
    logging.getLogger("sparkles.alpha").info("one")
    logging.getLogger("sparkles.beta").warning("two")
    path = tmp_path / "logs.jsonl"
    assert svc.export_jsonl(str(path), name_contains="beta") == 1
    assert svc.export_jsonl(str(path), level="INFO", append=True) == 1
    rows = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
    assert [r["message"] for r in rows] == ["two", "one"]


def test_detach_stops_capture():
    svc = LoggingService()
    svc.attach()
    svc.detach()
    logging.getLogger("sparkles.test").warning("ignored")
    assert svc.recent() == []


def test_configure_logging_level():
    logger = configure_logging("INFO")
    try:
        assert logger.name == "sparkles"
        assert logger.level == logging.INFO
    finally:
        logger.setLevel(logging.NOTSET)
