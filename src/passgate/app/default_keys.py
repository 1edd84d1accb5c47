# ---------------------------------------------------------------------------
# File: default_keys.py
# ---------------------------------------------------------------------------
# Description:
#	Default key bindings for passgate.
#
# Notes:
#	- This module only declares bindings (policy).
#	- Session keymap: quit / submit, checked in every state.
#	- Input keymap: editing keys for the password field (entry screen only).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	passgate dev				Initial coding / release
# 10/13/2026	passgate dev				Add readline-style input bindings
# ---------------------------------------------------------------------------

from __future__ import annotations

from passgate.app.keys import KeyMap
from passgate.ui.password_input import (
	INPUT_DELETE_BACK,
	INPUT_DELETE_FORWARD,
	INPUT_DELETE_TO_END,
	INPUT_DELETE_TO_START,
	INPUT_END,
	INPUT_HOME,
	INPUT_LEFT,
	INPUT_RIGHT,
)


SESSION_QUIT = "session.quit"
SESSION_SUBMIT = "session.submit"


def build_session_keymap() -> KeyMap:
	km = KeyMap()

	km.bind("esc", SESSION_QUIT)
	km.bind("ctrl+c", SESSION_QUIT)

	km.bind("enter", SESSION_SUBMIT)

	return km


def build_input_keymap() -> KeyMap:
	km = KeyMap()

	km.bind("backspace", INPUT_DELETE_BACK)
	km.bind("ctrl+h", INPUT_DELETE_BACK)
	km.bind("delete", INPUT_DELETE_FORWARD)
	km.bind("ctrl+d", INPUT_DELETE_FORWARD)

	km.bind("left", INPUT_LEFT)
	km.bind("ctrl+b", INPUT_LEFT)
	km.bind("right", INPUT_RIGHT)
	km.bind("ctrl+f", INPUT_RIGHT)

	km.bind("home", INPUT_HOME)
	km.bind("ctrl+a", INPUT_HOME)
	km.bind("end", INPUT_END)
	km.bind("ctrl+e", INPUT_END)

	km.bind("ctrl+u", INPUT_DELETE_TO_START)
	km.bind("ctrl+k", INPUT_DELETE_TO_END)

	return km
