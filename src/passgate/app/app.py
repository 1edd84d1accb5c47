# ---------------------------------------------------------------------------
# File: app.py
# ---------------------------------------------------------------------------
# Description:
#	Tk host for passgate: window, theme, key events, timers.
#
# Notes:
#	- App owns a SessionRunner and gives it Tk-backed Scheduler/ScreenSink.
#	- Keys arrive through a single <KeyPress> binding and are translated to
#	  canonical KeyPress events (see keys.key_from_tk).
#	- On quit the farewell screen stays up for cfg "farewell_ms", then the
#	  window is destroyed and mainloop() returns.
#
#	Supported cfg keys (besides session/logging/telemetry keys):
#		"title"			(default: "passgate")
#		"theme"			(default: "equilux")
#		"font"			(default: "TkFixedFont")
#		"farewell_ms"	(default: 750)
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/14/2026	passgate dev				Initial coding / release
# 10/15/2026	passgate dev				Add ttkthemes theme + geometry guards
# 10/16/2026	passgate dev				Cancel pending timers on destroy
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Callable

import tkinter as tk

from ttkthemes import ThemedStyle

from passgate.app.events import QuitReason
from passgate.app.keys import key_from_tk
from passgate.app.machine import SessionMachine
from passgate.app.runner import SessionRunner
from passgate.core.config import AppConfig, SessionSettings
from passgate.core.logging import get_app_logger
from passgate.core.telemetry import Telemetry, get_telemetry
from passgate.ui.screen_view import ScreenView


DEFAULT_THEME = "equilux"
DEFAULT_FAREWELL_MS = 750


class TkScheduler:
	"""
	Scheduler backed by Tk.after(); remembers pending ids so they can be
	cancelled when the window goes away.
	"""

	def __init__(self, widget: tk.Misc) -> None:
		self._widget = widget
		self._pending: set[str] = set()

	def schedule(self, delay: float, callback: Callable[[], None]) -> None:
		ms = max(0, int(round(delay * 1000)))
		after_id = ""

		def _fire() -> None:
			self._pending.discard(after_id)
			callback()

		after_id = self._widget.after(ms, _fire)
		self._pending.add(after_id)

	def pending(self) -> int:
		return len(self._pending)

	def cancel_all(self) -> None:
		for after_id in list(self._pending):
			try:
				self._widget.after_cancel(after_id)
			except tk.TclError:
				pass
		self._pending.clear()


class App(tk.Tk):
	"""
	App

	Root window for one passgate session.
	"""

	def __init__(
		self,
		width: int | None = None,
		height: int | None = None,
		cfg: AppConfig | dict[str, Any] | None = None,
		telemetry: Telemetry | None = None,
	) -> None:
		super().__init__()

		self.cfg = AppConfig.wrap(cfg)
		self.log = get_app_logger("tk")
		self.title_text = str(self.cfg.get("title", "passgate"))
		self.title(self.title_text)

		self.theme = self._apply_theme(str(self.cfg.get("theme", DEFAULT_THEME)))
		self.farewell_ms = int(self.cfg.get("farewell_ms", DEFAULT_FAREWELL_MS))

		self.update_idletasks()
		self._apply_geometry(width, height)

		# -------------------------------------------------------------------
		# Screen + session wiring
		# -------------------------------------------------------------------

		self.view = ScreenView(id="screen", font=str(self.cfg.get("font", "TkFixedFont")))
		self.view.mount(self)
		self.view.layout()

		self.scheduler = TkScheduler(self)
		self.machine = SessionMachine(SessionSettings.from_config(self.cfg))
		self.runner = SessionRunner(
			self.machine,
			self.scheduler,
			sink=self.view,
			on_quit=self._on_quit,
			telemetry=telemetry or get_telemetry(),
		)

		self.bind("<KeyPress>", self._on_key)
		self.protocol("WM_DELETE_WINDOW", self.destroy)

	# -----------------------------------------------------------------------
	# Events
	# -----------------------------------------------------------------------

	def _on_key(self, event: tk.Event) -> str:
		key = key_from_tk(event.keysym, event.char, int(event.state))
		if key is not None:
			self.runner.dispatch(key)
		return "break"

	def _on_quit(self, reason: QuitReason) -> None:
		self.after(self.farewell_ms, self.destroy)

	# -----------------------------------------------------------------------
	# Window setup
	# -----------------------------------------------------------------------

	def _apply_theme(self, theme: str) -> str:
		style = ThemedStyle(self)
		available = style.get_themes()
		if theme not in available:
			self.log.warning("Unknown theme %r; keeping %r", theme, style.theme_use())
			return style.theme_use()
		style.set_theme(theme)
		return theme

	def _apply_geometry(self, width: int | None, height: int | None) -> None:
		screen_w = self.winfo_screenwidth()
		screen_h = self.winfo_screenheight()

		if width is None and height is None:
			win_w = screen_w
			win_h = screen_h
		else:
			req_w = width if width is not None else screen_w
			req_h = height if height is not None else screen_h

			win_w = max(1, min(req_w, screen_w))
			win_h = max(1, min(req_h, screen_h))

		x = max(0, (screen_w - win_w) // 2)
		y = max(0, (screen_h - win_h) // 2)

		self.geometry(f"{win_w}x{win_h}+{x}+{y}")

	# -----------------------------------------------------------------------
	# Runtime
	# -----------------------------------------------------------------------

	def run(self) -> None:
		"""
		Start the session and run the Tk event loop until the window closes.
		"""
		self.runner.start()
		self.focus_force()
		self.mainloop()

	def destroy(self) -> None:
		scheduler = getattr(self, "scheduler", None)
		if scheduler is not None:
			scheduler.cancel_all()
		super().destroy()

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} title={self.title_text!r}>"
