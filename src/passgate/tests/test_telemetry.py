# ---------------------------------------------------------------------------
# File: test_telemetry.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for passgate.core.telemetry.
#
# Notes:
#	- Pure unit tests; no Tkinter dependency.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/13/2026	passgate dev				Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging

from passgate.core.telemetry import (
	LogSink,
	MemorySink,
	Telemetry,
	get_telemetry,
	init_telemetry,
)


def test_disabled_telemetry_is_noop():
	sink = MemorySink()
	t = Telemetry(enabled=False, sink=sink)

	t.event("session.start", {"ticks": 100})
	t.counter("keys.pressed")
	with t.timer("render.duration_ms"):
		pass

	assert sink.events == []
	assert sink.metrics == []


def test_event_and_counter_reach_sink():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	t.event("session.quit", {"reason": "timeout"})
	t.counter("session.frames", 2)
	t.counter("session.frames")

	assert sink.event_names() == ["session.quit"]
	assert sink.events[0].attrs == {"reason": "timeout"}
	assert sink.events[0].timestamp > 0.0
	assert sink.metric_total("session.frames") == 3.0


def test_timer_emits_non_negative_metric():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	with t.timer("render.duration_ms", {"phase": "entry"}):
		pass

	assert len(sink.metrics) == 1
	assert sink.metrics[0].value >= 0.0
	assert sink.metrics[0].attrs == {"phase": "entry"}


def test_memorysink_clear():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)
	t.event("x")
	t.counter("y")

	sink.clear()

	assert sink.events == []
	assert sink.metrics == []


def test_log_sink_writes_debug_records(caplog):
	logger = logging.getLogger("passgate.tests.telemetry")
	t = Telemetry(enabled=True, sink=LogSink(logger))

	with caplog.at_level(logging.DEBUG, logger="passgate.tests.telemetry"):
		t.event("session.phase", {"from": "entry", "to": "loading"})

	assert "telemetry.event name=session.phase" in caplog.text


def test_get_telemetry_is_safe_before_init():
	t = get_telemetry()

	assert isinstance(t, Telemetry)
	t.event("should.not.raise")


def test_init_telemetry_variants():
	assert init_telemetry({"telemetry_enabled": False}).enabled is False
	assert init_telemetry(None).enabled is False

	t = init_telemetry({"telemetry_enabled": True, "telemetry_sink": "log"}, logger=None)
	assert t.enabled is True
	assert get_telemetry() is t

	t.event("enabled.nullsink")
