import logging

from freestyle_judge.utils.logging_config import _resolve_level, configure_logging
from freestyle_judge.utils.observability import get_logger
from freestyle_judge.utils.telemetry import StructuredTelemetry, TelemetryLogger


def test_structured_telemetry_emits_logging_events(caplog, fake_clock):
    telemetry = StructuredTelemetry(time_fn=fake_clock)
    telemetry.add_listener(TelemetryLogger())

    caplog.set_level(logging.INFO, logger="freestyle_judge.utils.telemetry")

    telemetry.start_trace("test-trace")
    with telemetry.timer("phase"):
        pass
    telemetry.increment("score.completed")
    telemetry.annotate("result.total_score", 79)

    messages = [record.getMessage() for record in caplog.records]
    assert any("Telemetry trace_started: test-trace" in message for message in messages)
    assert any("Telemetry timing: phase" in message for message in messages)
    assert any("Telemetry counter: score.completed" in message for message in messages)
    assert any("Telemetry metadata: result.total_score" in message for message in messages)


def test_timer_uses_injected_clock(fake_clock):
    telemetry = StructuredTelemetry(time_fn=fake_clock)
    telemetry.start_trace("timed")

    with telemetry.timer("step", {"stage": "rhyme"}):
        pass

    snapshot = telemetry.snapshot()
    assert snapshot["timings"]["step"]["total"] == 0.01
    assert snapshot["events"][-1]["metadata"] == {"stage": "rhyme"}


def test_events_are_bounded(fake_clock):
    telemetry = StructuredTelemetry(time_fn=fake_clock, max_events=3)
    telemetry.start_trace("bounded")
    for index in range(5):
        with telemetry.timer(f"step-{index}"):
            pass

    names = [event["name"] for event in telemetry.latest_snapshot()["events"]]
    assert names == ["step-2", "step-3", "step-4"]


def test_structured_logger_renders_context(caplog):
    caplog.set_level(logging.INFO, logger="freestyle_judge.tests")
    logger = get_logger("freestyle_judge.tests").bind(component="unit")

    logger.info("Scored", context={"theme": "maguro"})

    assert caplog.records[-1].getMessage() == 'Scored | {"component": "unit", "theme": "maguro"}'


def test_resolve_level():
    assert _resolve_level(None) == logging.INFO
    assert _resolve_level("debug") == logging.DEBUG
    assert _resolve_level("10") == 10
    assert _resolve_level("nonsense") == logging.INFO


def test_configure_logging_reads_environment(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    monkeypatch.setenv("FREESTYLE_JUDGE_LOG_LEVEL", "ERROR")
    previous_level = logging.getLogger("freestyle_judge").level

    try:
        configure_logging(force=True)
    finally:
        logging.getLogger("freestyle_judge").setLevel(previous_level)

    assert calls[-1]["level"] == logging.ERROR
