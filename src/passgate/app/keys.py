# ---------------------------------------------------------------------------
# File: keys.py
# ---------------------------------------------------------------------------
# Description:
#	Key mapping for passgate (canonical key name -> action id), plus the
#	translation from Tk key events to canonical KeyPress events.
#
# Notes:
#	- KeyMap is toolkit-agnostic; key_from_tk is the only Tk-aware piece and
#	  it works on plain values (keysym/char/state), not tk.Event objects.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	passgate dev				Initial coding / release
# 10/13/2026	passgate dev				Add key_from_tk
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from passgate.app.events import KeyPress


# Tk event.state bit for the Control modifier.
TK_CONTROL_MASK = 0x0004

# Tk keysym -> canonical name
_TK_NAMED_KEYS: dict[str, str] = {
	"Escape": "esc",
	"Return": "enter",
	"KP_Enter": "enter",
	"BackSpace": "backspace",
	"Delete": "delete",
	"KP_Delete": "delete",
	"Left": "left",
	"KP_Left": "left",
	"Right": "right",
	"KP_Right": "right",
	"Home": "home",
	"KP_Home": "home",
	"End": "end",
	"KP_End": "end",
	"Tab": "tab",
	"Up": "up",
	"Down": "down",
}


@dataclass
class KeyMap:
	"""
	KeyMap

	Stores bindings of canonical key names (e.g., "ctrl+c") to action ids
	(e.g., "session.quit").
	"""
	_bindings: dict[str, str] = field(default_factory=dict)

	def bind(self, key: str, action_id: str, *, overwrite: bool = True) -> None:
		if not key:
			raise ValueError("key must be a non-empty string")
		if not action_id:
			raise ValueError("action_id must be a non-empty string")

		if not overwrite and key in self._bindings:
			raise ValueError(f"Key binding already exists for {key!r}")

		self._bindings[key] = action_id

	def unbind(self, key: str) -> None:
		self._bindings.pop(key, None)

	def resolve(self, key: str) -> Optional[str]:
		return self._bindings.get(key)

	def keys_for(self, action_id: str) -> list[str]:
		return [k for k, a in self._bindings.items() if a == action_id]

	def keys(self) -> list[str]:
		return list(self._bindings.keys())

	def items(self) -> list[tuple[str, str]]:
		return list(self._bindings.items())

	def clear(self) -> None:
		self._bindings.clear()


def key_from_tk(keysym: str, char: str = "", state: int = 0) -> Optional[KeyPress]:
	"""
	Translate Tk key event fields into a KeyPress.

	Returns None for keys the session has no use for (bare modifiers,
	function keys, ...).
	"""
	if state & TK_CONTROL_MASK and len(keysym) == 1 and keysym.isalpha():
		return KeyPress(key=f"ctrl+{keysym.lower()}")

	named = _TK_NAMED_KEYS.get(keysym)
	if named is not None:
		return KeyPress(key=named)

	if char and len(char) == 1 and char.isprintable():
		return KeyPress.char(char)

	return None
