# ---------------------------------------------------------------------------
# File: screen_view.py
# ---------------------------------------------------------------------------
# Description:
#	ScreenView: shows a rendered Screen in a read-only, monospaced tk.Text.
#
# Notes:
#	- One Text tag per style role, configured once from the style table.
#	- show() replaces the whole content; the Text stays disabled so the
#	  user cannot edit it (keys go to the App binding instead).
#	- Implements the runner's ScreenSink protocol.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/14/2026	passgate dev				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional

import tkinter as tk

from .component import Component
from .styles import DEFAULT_BACKGROUND, DEFAULT_STYLES, ROLE_TEXT, Screen, StyleSpec, plain_text


@dataclass
class ScreenView(Component):
	styles: Mapping[str, StyleSpec] = field(default_factory=lambda: DEFAULT_STYLES)
	font: str = "TkFixedFont"
	padding: int = 16

	# Last screen shown (kept for redraws and tests)
	last_text: str = field(default="", init=False, repr=False)
	_text: Optional[tk.Text] = field(default=None, init=False, repr=False)

	def build(self, parent: tk.Misc) -> tk.Widget:
		base = self.styles.get(ROLE_TEXT, StyleSpec())
		text = tk.Text(
			parent,
			font=self.font,
			wrap="none",
			borderwidth=0,
			highlightthickness=0,
			padx=self.padding,
			pady=self.padding,
			background=base.background or DEFAULT_BACKGROUND,
			foreground=base.foreground or "white",
			cursor="arrow",
			takefocus=0,
		)

		for role, spec in self.styles.items():
			options: dict[str, str] = {}
			if spec.foreground:
				options["foreground"] = spec.foreground
			if spec.background:
				options["background"] = spec.background
			text.tag_configure(role, **options)

		text.configure(state="disabled")
		self._text = text
		return text

	def show(self, screen: Screen) -> None:
		self.last_text = plain_text(screen)

		if self._text is None:
			return

		self._text.configure(state="normal")
		self._text.delete("1.0", "end")
		for span in screen:
			self._text.insert("end", span.text, (span.role,))
		self._text.configure(state="disabled")

	def destroy(self) -> None:
		self._text = None
		super().destroy()
