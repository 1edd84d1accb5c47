# ---------------------------------------------------------------------------
# File: session.py
# ---------------------------------------------------------------------------
# Description:
#	Session record for one run of passgate.
#
# Notes:
#	- Immutable; SessionMachine.update() returns a new Session per event.
#	- phase is derived from the flags, never stored.
#	- tick_generation names the live countdown chain; it changes on submit
#	  and on load so ticks scheduled earlier are dropped.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	passgate dev				Initial coding / release
# 10/14/2026	passgate dev				Track quit_reason
# 10/19/2026	passgate dev				Track tick_generation
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from passgate.app.events import QuitReason
from passgate.ui.password_input import PasswordInput


class Phase(str, Enum):
	ENTRY = "entry"
	LOADING = "loading"
	SUCCESS = "success"
	QUITTING = "quitting"


@dataclass(frozen=True, slots=True)
class Session:
	password: PasswordInput = field(default_factory=PasswordInput)
	entered: bool = False
	ticks: int = 100
	frames: int = 0
	progress: float = 0.0
	loaded: bool = False
	quitting: bool = False
	quit_reason: Optional[QuitReason] = None
	tick_generation: int = 0

	@property
	def phase(self) -> Phase:
		if self.quitting:
			return Phase.QUITTING
		if not self.entered:
			return Phase.ENTRY
		if not self.loaded:
			return Phase.LOADING
		return Phase.SUCCESS
