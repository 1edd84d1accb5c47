# ---------------------------------------------------------------------------
# File: test_runner.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for SessionRunner (effects, rendering, telemetry).
#
# Notes:
#	- Pure unit tests; uses manual and fake-clock schedulers instead of Tk timers.
#	- Uses MemorySink for deterministic telemetry assertions.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/14/2026	passgate dev				Initial tests
# 10/16/2026	passgate dev				Add telemetry assertions (MemorySink)
# 10/19/2026	passgate dev				Clock-ordered scheduler; success countdown length
# ---------------------------------------------------------------------------

from __future__ import annotations

import heapq
import itertools
from typing import Callable

import pytest

from passgate.app.events import KeyPress, QuitReason
from passgate.app.machine import SessionMachine
from passgate.app.runner import Scheduler, ScreenSink, SessionRunner
from passgate.core.config import SessionSettings
from passgate.core.telemetry import MemorySink, Telemetry
from passgate.ui.styles import Screen, plain_text
from passgate.ui.views import FAREWELL_TEXT


class _ManualScheduler:
	"""
	Collects scheduled callbacks; tests fire them explicitly.
	"""

	def __init__(self) -> None:
		self.pending: list[tuple[float, Callable[[], None]]] = []

	def schedule(self, delay: float, callback: Callable[[], None]) -> None:
		self.pending.append((delay, callback))

	def fire_next(self) -> float:
		delay, callback = self.pending.pop(0)
		callback()
		return delay

	def run_until_idle(self, limit: int = 1000) -> int:
		fired = 0
		while self.pending and fired < limit:
			self.fire_next()
			fired += 1
		return fired


class _ClockScheduler:
	"""
	Fires callbacks in due-time order against a fake clock.
	"""

	def __init__(self) -> None:
		self.now = 0.0
		self._queue: list[tuple[float, int, Callable[[], None]]] = []
		self._seq = itertools.count()

	def schedule(self, delay: float, callback: Callable[[], None]) -> None:
		heapq.heappush(self._queue, (self.now + delay, next(self._seq), callback))

	def run_until_idle(self, limit: int = 10000, on_fire: Callable[[], None] = lambda: None) -> None:
		fired = 0
		while self._queue and fired < limit:
			self.now, _, callback = heapq.heappop(self._queue)
			callback()
			on_fire()
			fired += 1


class _RecordingSink:
	def __init__(self) -> None:
		self.screens: list[str] = []

	def show(self, screen: Screen) -> None:
		self.screens.append(plain_text(screen))


def _runner(**settings) -> tuple[SessionRunner, _ManualScheduler, _RecordingSink, MemorySink, list[QuitReason]]:
	scheduler = _ManualScheduler()
	sink = _RecordingSink()
	mem = MemorySink()
	quits: list[QuitReason] = []
	runner = SessionRunner(
		SessionMachine(SessionSettings(**settings)),
		scheduler,
		sink=sink,
		on_quit=quits.append,
		telemetry=Telemetry(enabled=True, sink=mem),
	)
	return runner, scheduler, sink, mem, quits


def _type(runner: SessionRunner, text: str) -> None:
	for ch in text:
		runner.dispatch(KeyPress.char(ch))


def test_fakes_satisfy_protocols():
	assert isinstance(_ManualScheduler(), Scheduler)
	assert isinstance(_RecordingSink(), ScreenSink)


def test_start_renders_and_schedules_tick():
	runner, scheduler, sink, mem, _ = _runner()

	runner.start()
	runner.start()

	assert len(sink.screens) == 1
	assert "Program quits in 100 seconds" in sink.screens[0]
	assert [d for d, _ in scheduler.pending] == [1.0]
	assert mem.event_names().count("session.start") == 1


def test_tick_rerenders_countdown():
	runner, scheduler, sink, _, _ = _runner()
	runner.start()

	scheduler.fire_next()

	assert "Program quits in 99 seconds" in sink.screens[-1]
	assert len(scheduler.pending) == 1


def test_full_successful_session():
	runner, scheduler, sink, mem, quits = _runner(success_countdown=3)
	runner.start()

	_type(runner, "password")
	runner.dispatch(KeyPress("enter"))

	# entry tick still pending + first frame
	assert len(scheduler.pending) == 2

	scheduler.run_until_idle()

	assert runner.finished is True
	assert runner.session.loaded is True
	assert quits == [QuitReason.COMPLETED]
	assert sink.screens[-1] == FAREWELL_TEXT
	assert any("Successful. Exiting in 1 seconds..." in s for s in sink.screens)

	assert mem.metric_total("session.frames") == 100.0
	assert mem.metric_total("keys.pressed") == 9.0
	phases = [(e.attrs["from"], e.attrs["to"]) for e in mem.events if e.name == "session.phase"]
	assert phases == [("entry", "loading"), ("loading", "success"), ("success", "quitting")]
	quit_ev = next(e for e in mem.events if e.name == "session.quit")
	assert quit_ev.attrs["reason"] == "completed"


def test_success_countdown_lasts_full_tick_intervals_when_loading_is_fast():
	clock = _ClockScheduler()
	quit_at: list[float] = []
	loaded_at: list[float] = []
	runner = SessionRunner(
		SessionMachine(SessionSettings(tick_interval=5.0, total_frames=10)),
		clock,
		on_quit=lambda _reason: quit_at.append(clock.now),
	)
	runner.start()

	_type(runner, "password")
	runner.dispatch(KeyPress("enter"))

	def _note_load() -> None:
		if runner.session.loaded and not loaded_at:
			loaded_at.append(clock.now)

	clock.run_until_idle(on_fire=_note_load)

	assert runner.session.quit_reason is QuitReason.COMPLETED
	assert loaded_at[0] < 5.0
	assert quit_at[0] - loaded_at[0] == pytest.approx(3 * 5.0)


def test_wrong_password_quits_silently():
	runner, scheduler, sink, mem, quits = _runner()
	runner.start()

	_type(runner, "guess")
	runner.dispatch(KeyPress("enter"))
	scheduler.run_until_idle()

	assert quits == [QuitReason.DENIED]
	assert sink.screens[-1] == FAREWELL_TEXT
	assert all("denied" not in s.lower() and "wrong" not in s.lower() for s in sink.screens)


def test_events_after_quit_are_ignored():
	runner, scheduler, sink, _, quits = _runner()
	runner.start()

	runner.dispatch(KeyPress("esc"))
	rendered = len(sink.screens)

	runner.dispatch(KeyPress.char("a"))
	scheduler.run_until_idle()

	assert quits == [QuitReason.USER]
	assert len(sink.screens) == rendered
	assert runner.session.password.value == ""


def test_entry_timeout_via_scheduler():
	runner, scheduler, _, _, quits = _runner(entry_timeout=5)
	runner.start()

	fired = scheduler.run_until_idle()

	assert fired == 5
	assert quits == [QuitReason.TIMEOUT]


def test_runner_without_sink():
	scheduler = _ManualScheduler()
	runner = SessionRunner(SessionMachine(), scheduler)

	runner.start()
	runner.dispatch(KeyPress("esc"))

	assert runner.finished is True
