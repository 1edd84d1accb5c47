# ---------------------------------------------------------------------------
# File: machine.py
# ---------------------------------------------------------------------------
# Description:
#	Session state machine for passgate.
#
# Notes:
#	- Pure: update() never touches timers, widgets, or the clock. It returns
#	  the next Session and the effects the host must perform.
#	- States: ENTRY -> LOADING -> SUCCESS, and QUITTING from anywhere.
#	- Once quitting, every event is a no-op (same session, no effects).
#	- Authentication failure is silent: the session quits with reason DENIED
#	  on the first event processed after submit.
#	- A countdown of N quits on the tick that would reach 0 (ticks <= 1), so
#	  it takes exactly N ticks (100 entry, 3 success) and "0 seconds" is never
#	  shown. Quitting only once ticks is already 0 would take N + 1 ticks.
#	- Each countdown chain carries a generation. Submit and load start a new
#	  one, and ticks from an older chain are dropped without rescheduling.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	passgate dev				Initial coding / release
# 10/14/2026	passgate dev				Return effects instead of scheduling
# 10/15/2026	passgate dev				Countdown of N takes exactly N ticks
# 10/19/2026	passgate dev				Drop ticks from superseded countdown chains
# ---------------------------------------------------------------------------

from __future__ import annotations

import hmac
from dataclasses import replace
from typing import Optional

from passgate.app.default_keys import (
	SESSION_QUIT,
	SESSION_SUBMIT,
	build_input_keymap,
	build_session_keymap,
)
from passgate.app.events import (
	Effect,
	Event,
	FrameTick,
	KeyPress,
	Quit,
	QuitReason,
	ScheduleEvent,
	SecondTick,
)
from passgate.app.keys import KeyMap
from passgate.app.session import Session
from passgate.core.config import SessionSettings
from passgate.core.easing import ease_in_out_circ


Update = tuple[Session, tuple[Effect, ...]]

_NO_EFFECTS: tuple[Effect, ...] = ()


class SessionMachine:
	"""
	SessionMachine

	Holds configuration only; all mutable state lives in Session values.
	"""

	def __init__(
		self,
		settings: Optional[SessionSettings] = None,
		*,
		keymap: Optional[KeyMap] = None,
		input_keymap: Optional[KeyMap] = None,
	) -> None:
		self.settings = settings or SessionSettings()
		self.keymap = keymap if keymap is not None else build_session_keymap()
		self.input_keymap = input_keymap if input_keymap is not None else build_input_keymap()

	# -----------------------------------------------------------------------
	# Lifecycle
	# -----------------------------------------------------------------------

	def initial(self) -> Session:
		return Session(ticks=self.settings.entry_timeout)

	def init(self) -> tuple[Effect, ...]:
		"""
		Effects to perform once at start-up (the entry countdown).
		"""
		return (self._next_tick(self.initial()),)

	def update(self, session: Session, event: Event) -> Update:
		if session.quitting:
			return session, _NO_EFFECTS

		if isinstance(event, KeyPress) and self.keymap.resolve(event.key) == SESSION_QUIT:
			return self._quit(session, QuitReason.USER)

		if not session.entered:
			return self._update_entry(session, event)
		return self._update_entered(session, event)

	def is_authorized(self, session: Session) -> bool:
		return hmac.compare_digest(
			session.password.value.encode("utf-8"),
			self.settings.secret.encode("utf-8"),
		)

	# -----------------------------------------------------------------------
	# Entry screen
	# -----------------------------------------------------------------------

	def _update_entry(self, session: Session, event: Event) -> Update:
		if isinstance(event, KeyPress):
			if self.keymap.resolve(event.key) == SESSION_SUBMIT:
				submitted = replace(
					session,
					entered=True,
					tick_generation=session.tick_generation + 1,
				)
				return submitted, (self._next_frame(),)
			password = session.password.handle_key(event, self.input_keymap)
			if password is session.password:
				return session, _NO_EFFECTS
			return replace(session, password=password), _NO_EFFECTS

		if isinstance(event, SecondTick):
			if event.generation != session.tick_generation:
				return session, _NO_EFFECTS
			return self._count_down(session, QuitReason.TIMEOUT)

		if isinstance(event, FrameTick):
			return session, _NO_EFFECTS

		raise TypeError(f"Unsupported event: {event!r}")

	# -----------------------------------------------------------------------
	# Loading / success screens
	# -----------------------------------------------------------------------

	def _update_entered(self, session: Session, event: Event) -> Update:
		if not isinstance(event, (KeyPress, SecondTick, FrameTick)):
			raise TypeError(f"Unsupported event: {event!r}")

		if not self.is_authorized(session):
			return self._quit(session, QuitReason.DENIED)

		if isinstance(event, FrameTick):
			if session.loaded:
				return session, _NO_EFFECTS
			return self._advance_frame(session)

		if isinstance(event, SecondTick):
			if not session.loaded or event.generation != session.tick_generation:
				return session, _NO_EFFECTS
			return self._count_down(session, QuitReason.COMPLETED)

		return session, _NO_EFFECTS

	def _advance_frame(self, session: Session) -> Update:
		frames = session.frames + 1
		progress = ease_in_out_circ(frames / self.settings.total_frames)

		if progress >= 1.0:
			done = replace(
				session,
				frames=frames,
				progress=1.0,
				loaded=True,
				ticks=self.settings.success_countdown,
				tick_generation=session.tick_generation + 1,
			)
			return done, (self._next_tick(done),)

		return replace(session, frames=frames, progress=progress), (self._next_frame(),)

	# -----------------------------------------------------------------------
	# Helpers
	# -----------------------------------------------------------------------

	def _count_down(self, session: Session, reason: QuitReason) -> Update:
		if session.ticks <= 1:
			return self._quit(replace(session, ticks=0), reason)
		return replace(session, ticks=session.ticks - 1), (self._next_tick(session),)

	def _quit(self, session: Session, reason: QuitReason) -> Update:
		return replace(session, quitting=True, quit_reason=reason), (Quit(reason),)

	def _next_tick(self, session: Session) -> ScheduleEvent:
		return ScheduleEvent(self.settings.tick_interval, SecondTick(session.tick_generation))

	def _next_frame(self) -> ScheduleEvent:
		return ScheduleEvent(self.settings.frame_interval, FrameTick())
