# ---------------------------------------------------------------------------
# File: events.py
# ---------------------------------------------------------------------------
# Description:
#	Event and effect types exchanged with the session state machine.
#
# Notes:
#	- Events flow in (KeyPress, SecondTick, FrameTick).
#	- Effects flow out (ScheduleEvent, Quit); the host performs them.
#	- All types are immutable and compare by value.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	passgate dev				Initial coding / release
# 10/14/2026	passgate dev				Add QuitReason
# 10/19/2026	passgate dev				Tag SecondTick with a countdown generation
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class KeyPress:
	"""
	A single key press.

	- key:	Canonical key name ("enter", "esc", "ctrl+c", "backspace", "a", ...).
	- text:	Printable text the key produces ("" for control keys).
	"""
	key: str
	text: str = ""

	@classmethod
	def char(cls, ch: str) -> "KeyPress":
		return cls(key=ch, text=ch)


@dataclass(frozen=True, slots=True)
class SecondTick:
	"""
	Countdown tick, delivered once per tick interval.

	- generation:	Countdown chain that scheduled it; stale chains are ignored.
	"""
	generation: int = 0


@dataclass(frozen=True, slots=True)
class FrameTick:
	"""Animation frame, delivered once per frame interval."""


Event = Union[KeyPress, SecondTick, FrameTick]


# ---------------------------------------------------------------------------
# Effects
# ---------------------------------------------------------------------------

class QuitReason(str, Enum):
	USER = "user"
	TIMEOUT = "timeout"
	DENIED = "denied"
	COMPLETED = "completed"


@dataclass(frozen=True, slots=True)
class ScheduleEvent:
	"""Deliver event once, no earlier than delay seconds from now."""
	delay: float
	event: Event


@dataclass(frozen=True, slots=True)
class Quit:
	"""Stop accepting input and exit after the farewell screen."""
	reason: QuitReason


Effect = Union[ScheduleEvent, Quit]
