# ---------------------------------------------------------------------------
# File: runner.py
# ---------------------------------------------------------------------------
# Description:
#	SessionRunner: drives a SessionMachine from a host event loop.
#
# Notes:
#	- UI-toolkit-agnostic: timers go through a Scheduler, screens through a
#	  ScreenSink. App wires Tk implementations of both.
#	- One event is fully processed (update, render, effects) before returning.
#	- After a Quit effect the runner renders the farewell screen, calls
#	  on_quit once, and ignores further events.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/14/2026	passgate dev				Initial coding / release
# 10/16/2026	passgate dev				Telemetry + phase logging
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol, runtime_checkable

from passgate.app.events import Effect, Event, FrameTick, KeyPress, Quit, QuitReason, ScheduleEvent
from passgate.app.machine import SessionMachine
from passgate.app.session import Session
from passgate.core.logging import get_app_logger
from passgate.core.telemetry import Telemetry, get_telemetry
from passgate.ui.styles import Screen
from passgate.ui.views import render_screen


@runtime_checkable
class Scheduler(Protocol):
	"""
	Minimal timer interface: call callback once, no earlier than delay seconds.
	"""

	def schedule(self, delay: float, callback: Callable[[], None]) -> None: ...


@runtime_checkable
class ScreenSink(Protocol):
	"""
	Minimal interface implemented by screen widgets.
	"""

	def show(self, screen: Screen) -> None: ...


QuitCallback = Callable[[QuitReason], None]


class SessionRunner:
	"""
	SessionRunner

	Owns the current Session and applies machine effects.
	"""

	def __init__(
		self,
		machine: SessionMachine,
		scheduler: Scheduler,
		*,
		sink: Optional[ScreenSink] = None,
		on_quit: Optional[QuitCallback] = None,
		telemetry: Optional[Telemetry] = None,
		logger: Optional[logging.Logger] = None,
	) -> None:
		self.machine = machine
		self.scheduler = scheduler
		self.sink = sink
		self.on_quit = on_quit
		self.telemetry = telemetry or get_telemetry()
		self.log = logger or get_app_logger("runner")

		self._session: Session = machine.initial()
		self._started = False
		self._finished = False

	@property
	def session(self) -> Session:
		return self._session

	@property
	def finished(self) -> bool:
		return self._finished

	# -----------------------------------------------------------------------
	# Driving
	# -----------------------------------------------------------------------

	def start(self) -> None:
		"""
		Render the first screen and perform start-up effects. Idempotent.
		"""
		if self._started:
			return
		self._started = True

		self.log.info("Session started (timeout=%ss)", self._session.ticks)
		self.telemetry.event("session.start", {"ticks": self._session.ticks})

		self._render()
		self._apply(self.machine.init())

	def dispatch(self, event: Event) -> None:
		if self._finished:
			return

		before = self._session
		self._session, effects = self.machine.update(before, event)

		if isinstance(event, KeyPress):
			self.telemetry.counter("keys.pressed")
		elif isinstance(event, FrameTick) and self._session.frames != before.frames:
			self.telemetry.counter("session.frames")

		if self._session.phase is not before.phase:
			self.log.debug("Phase %s -> %s", before.phase.value, self._session.phase.value)
			self.telemetry.event(
				"session.phase",
				{"from": before.phase.value, "to": self._session.phase.value},
			)

		if self._session is not before:
			self._render()

		self._apply(effects)

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _render(self) -> None:
		if self.sink is None:
			return
		with self.telemetry.timer("render.duration_ms"):
			self.sink.show(render_screen(self._session, bar_width=self.machine.settings.bar_width))

	def _apply(self, effects: tuple[Effect, ...]) -> None:
		for effect in effects:
			if isinstance(effect, ScheduleEvent):
				self.scheduler.schedule(effect.delay, self._deliver(effect.event))
			elif isinstance(effect, Quit):
				self._finish(effect.reason)
			else:
				raise TypeError(f"Unsupported effect: {effect!r}")

	def _deliver(self, event: Event) -> Callable[[], None]:
		def _callback() -> None:
			self.dispatch(event)
		return _callback

	def _finish(self, reason: QuitReason) -> None:
		if self._finished:
			return
		self._finished = True

		if reason is QuitReason.DENIED:
			self.log.info("Session ended: password rejected")
		else:
			self.log.info("Session ended: %s", reason.value)
		self.telemetry.event("session.quit", {"reason": reason.value})

		if self.on_quit is not None:
			self.on_quit(reason)
