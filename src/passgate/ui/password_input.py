# ---------------------------------------------------------------------------
# File: password_input.py
# ---------------------------------------------------------------------------
# Description:
#	Masked single-line text input for passgate.
#
# Notes:
#	- Immutable: every edit returns a new PasswordInput.
#	- Knows nothing about Tk; it consumes KeyPress values and renders Spans.
#	- Edit actions are plain ids so keymaps can bind any key to them.
#	- The visible window only scrolls when the cursor leaves it.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/13/2026	passgate dev				Initial coding / release
# 10/14/2026	passgate dev				Horizontal scrolling past width
# 10/19/2026	passgate dev				Keep the scroll offset between edits
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Optional

from .styles import ROLE_CURSOR, ROLE_PLACEHOLDER, ROLE_TEXT, Span

if TYPE_CHECKING:
	from passgate.app.events import KeyPress
	from passgate.app.keys import KeyMap


INPUT_DELETE_BACK = "input.delete_back"
INPUT_DELETE_FORWARD = "input.delete_forward"
INPUT_LEFT = "input.left"
INPUT_RIGHT = "input.right"
INPUT_HOME = "input.home"
INPUT_END = "input.end"
INPUT_DELETE_TO_START = "input.delete_to_start"
INPUT_DELETE_TO_END = "input.delete_to_end"


def _scroll(offset: int, cursor: int, length: int, width: int) -> int:
	"""
	Smallest change to offset that keeps cursor inside a window of width cells.
	"""
	if width <= 0:
		return 0
	offset = min(offset, max(0, length + 1 - width))
	if cursor < offset:
		return cursor
	if cursor >= offset + width:
		return cursor - width + 1
	return offset


@dataclass(frozen=True, slots=True)
class PasswordInput:
	"""
	PasswordInput

	- value:		Current text (never shown unmasked).
	- cursor:		Insertion point, 0..len(value).
	- offset:		First visible cell when the value is wider than width.
	- width:		Visible cells for the text; 0 means no scrolling.
	- char_limit:	Maximum length; 0 means unlimited.
	"""
	value: str = ""
	cursor: int = 0
	offset: int = 0

	prompt: str = ">> "
	placeholder: str = "password"
	echo_char: str = "•"
	width: int = 32
	char_limit: int = 0

	# -----------------------------------------------------------------------
	# Editing
	# -----------------------------------------------------------------------

	def _moved(self, value: str, cursor: int) -> "PasswordInput":
		offset = _scroll(self.offset, cursor, len(value), self.width)
		return replace(self, value=value, cursor=cursor, offset=offset)

	def insert(self, text: str) -> "PasswordInput":
		chars = "".join(ch for ch in text if ch.isprintable() and ch not in "\r\n\t")
		if self.char_limit > 0:
			room = max(0, self.char_limit - len(self.value))
			chars = chars[:room]
		if not chars:
			return self

		value = self.value[: self.cursor] + chars + self.value[self.cursor :]
		return self._moved(value, self.cursor + len(chars))

	def perform(self, action: str) -> "PasswordInput":
		"""
		Apply an edit action id. Unknown ids leave the input unchanged.
		"""
		v, c = self.value, self.cursor

		if action == INPUT_DELETE_BACK:
			if c == 0:
				return self
			return self._moved(v[: c - 1] + v[c:], c - 1)
		if action == INPUT_DELETE_FORWARD:
			if c >= len(v):
				return self
			return self._moved(v[:c] + v[c + 1 :], c)
		if action == INPUT_LEFT:
			return self._moved(v, max(0, c - 1))
		if action == INPUT_RIGHT:
			return self._moved(v, min(len(v), c + 1))
		if action == INPUT_HOME:
			return self._moved(v, 0)
		if action == INPUT_END:
			return self._moved(v, len(v))
		if action == INPUT_DELETE_TO_START:
			return self._moved(v[c:], 0)
		if action == INPUT_DELETE_TO_END:
			return self._moved(v[:c], c)

		return self

	def handle_key(self, key: "KeyPress", keymap: Optional["KeyMap"] = None) -> "PasswordInput":
		"""
		Apply a key press: bound keys become edit actions, anything else with
		printable text is inserted.
		"""
		action = keymap.resolve(key.key) if keymap is not None else None
		if action:
			return self.perform(action)
		if key.text:
			return self.insert(key.text)
		return self

	# -----------------------------------------------------------------------
	# Rendering
	# -----------------------------------------------------------------------

	def masked(self) -> str:
		return self.echo_char * len(self.value)

	def render_spans(self) -> tuple[Span, ...]:
		prompt = Span(self.prompt, ROLE_TEXT)

		if not self.value:
			if not self.placeholder:
				return (prompt, Span(" ", ROLE_CURSOR))
			return (
				prompt,
				Span(self.placeholder[0], ROLE_CURSOR),
				Span(self.placeholder[1:], ROLE_PLACEHOLDER),
			)

		masked = self.masked()
		if self.width > 0:
			offset = _scroll(self.offset, self.cursor, len(masked), self.width)
			end = offset + self.width
		else:
			offset = 0
			end = len(masked)

		before = masked[offset : self.cursor]
		at = masked[self.cursor] if self.cursor < len(masked) else " "
		after = masked[self.cursor + 1 : end]

		spans = [prompt]
		if before:
			spans.append(Span(before, ROLE_TEXT))
		spans.append(Span(at, ROLE_CURSOR))
		if after:
			spans.append(Span(after, ROLE_TEXT))
		return tuple(spans)

	def render(self) -> str:
		return "".join(s.text for s in self.render_spans())
