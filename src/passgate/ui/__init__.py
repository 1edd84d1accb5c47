# ---------------------------------------------------------------------------
# File: ui/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Public UI package surface for passgate.
#
# Notes:
#   - Uses lazy exports (PEP 562) so headless code never imports tkinter.
#   - Do NOT import from passgate.ui inside ui modules; import specific modules instead.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"Component",
	"ScreenView",
	"PasswordInput",
	"Span",
	"StyleSpec",
	"build_style_table",
	"progress_bar",
	"render_screen",
]

# Map public name -> (module, attribute)
_EXPORTS: dict[str, tuple[str, str]] = {
	"Component": ("passgate.ui.component", "Component"),
	"ScreenView": ("passgate.ui.screen_view", "ScreenView"),
	"PasswordInput": ("passgate.ui.password_input", "PasswordInput"),
	"Span": ("passgate.ui.styles", "Span"),
	"StyleSpec": ("passgate.ui.styles", "StyleSpec"),
	"build_style_table": ("passgate.ui.styles", "build_style_table"),
	"progress_bar": ("passgate.ui.progress", "progress_bar"),
	"render_screen": ("passgate.ui.views", "render_screen"),
}

def __getattr__(name: str) -> Any:
	try:
		mod_name, attr_name = _EXPORTS[name]
	except KeyError as ex:
		raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from ex

	import importlib
	mod = importlib.import_module(mod_name)
	return getattr(mod, attr_name)

def __dir__() -> list[str]:
	return sorted(set(list(globals().keys()) + list(__all__)))

if TYPE_CHECKING:
	from passgate.ui.component import Component
	from passgate.ui.password_input import PasswordInput
	from passgate.ui.progress import progress_bar
	from passgate.ui.screen_view import ScreenView
	from passgate.ui.styles import Span, StyleSpec, build_style_table
	from passgate.ui.views import render_screen
