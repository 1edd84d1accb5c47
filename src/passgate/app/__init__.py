# ---------------------------------------------------------------------------
# File: app/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Public app package surface for passgate.
#
# Notes:
#   - Lazy exports keep "import passgate.app.machine" free of Tk/ttkthemes.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"App",
	"Session",
	"SessionMachine",
	"SessionRunner",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"App": ("passgate.app.app", "App"),
	"Session": ("passgate.app.session", "Session"),
	"SessionMachine": ("passgate.app.machine", "SessionMachine"),
	"SessionRunner": ("passgate.app.runner", "SessionRunner"),
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
	from passgate.app.app import App
	from passgate.app.machine import SessionMachine
	from passgate.app.runner import SessionRunner
	from passgate.app.session import Session
