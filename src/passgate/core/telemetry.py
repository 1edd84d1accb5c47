# ---------------------------------------------------------------------------
# File: telemetry.py
# Description:
#	Lightweight telemetry for passgate sessions.
#
#	Emits:
#	  - events	(session.start, session.phase, session.quit)
#	  - counters	(keys.pressed, session.frames)
#	  - timers	(render.duration_ms)
#
# Notes:
#	- Safe to call when disabled (default).
#	- Backends are "sinks": NullSink, LogSink, MemorySink (tests).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/13/2026	passgate dev				Initial coding / release
# 10/16/2026	passgate dev				Add snapshot helpers on MemorySink
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol


# ---------------------------------------------------------------------------
# Data models
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TelemetryEvent:
	name: str
	timestamp: float
	attrs: Dict[str, Any]


@dataclass(frozen=True, slots=True)
class TelemetryMetric:
	name: str
	value: float
	attrs: Dict[str, Any]


# ---------------------------------------------------------------------------
# Sinks
# ---------------------------------------------------------------------------

class TelemetrySink(Protocol):
	def emit_event(self, event: TelemetryEvent) -> None: ...
	def emit_metric(self, metric: TelemetryMetric) -> None: ...


class NullSink:
	"""
	Discards everything.
	"""

	def emit_event(self, event: TelemetryEvent) -> None:
		return

	def emit_metric(self, metric: TelemetryMetric) -> None:
		return


class LogSink:
	"""
	Writes events and metrics to a logger at DEBUG level.
	"""

	def __init__(self, logger: logging.Logger) -> None:
		self._log = logger

	def emit_event(self, event: TelemetryEvent) -> None:
		self._log.debug("telemetry.event name=%s attrs=%s", event.name, event.attrs)

	def emit_metric(self, metric: TelemetryMetric) -> None:
		self._log.debug(
			"telemetry.metric name=%s value=%s attrs=%s",
			metric.name,
			metric.value,
			metric.attrs,
		)


class MemorySink:
	"""
	In-memory sink for tests.
	"""

	def __init__(self) -> None:
		self.events: list[TelemetryEvent] = []
		self.metrics: list[TelemetryMetric] = []

	def emit_event(self, event: TelemetryEvent) -> None:
		self.events.append(event)

	def emit_metric(self, metric: TelemetryMetric) -> None:
		self.metrics.append(metric)

	def event_names(self) -> list[str]:
		return [e.name for e in self.events]

	def metric_total(self, name: str) -> float:
		return sum(m.value for m in self.metrics if m.name == name)

	def clear(self) -> None:
		self.events.clear()
		self.metrics.clear()


# ---------------------------------------------------------------------------
# Facade
# ---------------------------------------------------------------------------

class Telemetry:
	"""
	Telemetry facade. Every method is a no-op when disabled.
	"""

	def __init__(self, enabled: bool, sink: TelemetrySink) -> None:
		self._enabled = enabled
		self._sink = sink

	@property
	def enabled(self) -> bool:
		return self._enabled

	def event(self, name: str, attrs: Optional[Dict[str, Any]] = None) -> None:
		if not self._enabled:
			return
		self._sink.emit_event(TelemetryEvent(name=name, timestamp=time.time(), attrs=attrs or {}))

	def counter(self, name: str, value: int = 1, attrs: Optional[Dict[str, Any]] = None) -> None:
		if not self._enabled:
			return
		self._sink.emit_metric(TelemetryMetric(name=name, value=float(value), attrs=attrs or {}))

	def timer(self, name: str, attrs: Optional[Dict[str, Any]] = None) -> "_TelemetryTimer":
		return _TelemetryTimer(self, name, attrs or {})


class _TelemetryTimer:
	"""
	Context manager reporting elapsed milliseconds as a counter.
	"""

	def __init__(self, telemetry: Telemetry, name: str, attrs: Dict[str, Any]) -> None:
		self._telemetry = telemetry
		self._name = name
		self._attrs = attrs
		self._start = 0.0

	def __enter__(self) -> "_TelemetryTimer":
		self._start = time.perf_counter()
		return self

	def __exit__(self, exc_type, exc, tb) -> None:
		elapsed_ms = (time.perf_counter() - self._start) * 1000.0
		self._telemetry.counter(self._name, value=int(elapsed_ms), attrs=self._attrs)


# ---------------------------------------------------------------------------
# Global helpers
# ---------------------------------------------------------------------------

_telemetry: Optional[Telemetry] = None


def init_telemetry(cfg: Any, logger: Optional[logging.Logger] = None) -> Telemetry:
	"""
	Initialize and return the global telemetry instance.

	cfg keys:
		telemetry_enabled:	bool (default False)
		telemetry_sink:		"null" | "log" (default "null")
	"""
	global _telemetry

	enabled = bool(cfg.get("telemetry_enabled", False)) if cfg is not None else False
	sink_name = cfg.get("telemetry_sink", "null") if cfg is not None else "null"

	if not enabled:
		_telemetry = Telemetry(False, NullSink())
	elif sink_name == "log" and logger is not None:
		_telemetry = Telemetry(True, LogSink(logger))
	else:
		_telemetry = Telemetry(True, NullSink())

	return _telemetry


def get_telemetry() -> Telemetry:
	"""
	Return the global telemetry instance (disabled until init_telemetry()).
	"""
	global _telemetry

	if _telemetry is None:
		_telemetry = Telemetry(False, NullSink())

	return _telemetry
