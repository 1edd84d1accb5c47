# ---------------------------------------------------------------------------
# File: logging.py
# ---------------------------------------------------------------------------
# Description:
#	Core logging helpers for passgate (stdlib logging).
#
# Notes:
#	- Safe to call before the Tk root exists.
#	- Idempotent initialization (won't duplicate handlers).
#	- Configuration is cfg-driven; first matching key wins.
#
#	Supported cfg keys:
#	- Level:		"logging.level", "log_level"		(default: "INFO")
#	- Console:		"logging.console", "log_console"	(default: True)
#	- File:			"logging.file", "log_file"			(default: None)
#	- Format:		"logging.format", "log_format"		(default: standard format)
#	- Date format:	"logging.datefmt", "log_datefmt"	(default: "%Y-%m-%d %H:%M:%S")
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	passgate dev				Initial coding / release
# 10/16/2026	passgate dev				Only touch handlers we installed
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any
import logging
import os


APP_LOGGER_NAME = "passgate.app"

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


# ---------------------------------------------------------------------------
# Module-scoped state (idempotent init)
# ---------------------------------------------------------------------------

_CONFIG_SIGNATURE: tuple[Any, ...] | None = None
_HANDLERS: list[logging.Handler] = []


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def get_logger(name: str) -> logging.Logger:
	return logging.getLogger(name)


def get_app_logger(component: str | None = None) -> logging.Logger:
	"""
	Return an application-scoped logger.

	Examples:
		get_app_logger()			-> passgate.app
		get_app_logger("runner")	-> passgate.app.runner
	"""
	if component:
		return logging.getLogger(f"{APP_LOGGER_NAME}.{component}")
	return logging.getLogger(APP_LOGGER_NAME)


def init_logging(cfg: Any | None = None) -> None:
	"""
	Initialize logging for the passgate logger tree.

	Handlers are attached to the "passgate" logger rather than the root so
	embedding applications keep their own setup. Calling again with the same
	configuration is a no-op; a changed configuration replaces the handlers
	installed by the previous call.
	"""
	global _CONFIG_SIGNATURE

	level = _coerce_level(_first(cfg, ("logging.level", "log_level"), "INFO"))
	console = bool(_first(cfg, ("logging.console", "log_console"), True))
	log_file = _first(cfg, ("logging.file", "log_file"), None)
	fmt = str(_first(cfg, ("logging.format", "log_format"), DEFAULT_FORMAT))
	datefmt = str(_first(cfg, ("logging.datefmt", "log_datefmt"), DEFAULT_DATEFMT))

	log_file = str(log_file) if log_file else None

	signature: tuple[Any, ...] = (level, console, log_file, fmt, datefmt)
	if _CONFIG_SIGNATURE == signature:
		return

	base = logging.getLogger("passgate")
	for h in _HANDLERS:
		base.removeHandler(h)
		h.close()
	_HANDLERS.clear()

	base.setLevel(level)
	formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

	if console:
		ch = logging.StreamHandler()
		ch.setLevel(level)
		ch.setFormatter(formatter)
		_HANDLERS.append(ch)

	if log_file:
		_ensure_parent_dir(log_file)
		fh = logging.FileHandler(log_file, mode="a", encoding="utf-8")
		fh.setLevel(level)
		fh.setFormatter(formatter)
		_HANDLERS.append(fh)

	for h in _HANDLERS:
		base.addHandler(h)

	_CONFIG_SIGNATURE = signature


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _first(cfg: Any | None, keys: tuple[str, ...], default: Any) -> Any:
	"""
	Return the first non-None value among keys, else default.

	cfg may be None, anything with get(key, default), or a dict.
	"""
	if cfg is None:
		return default

	getter = getattr(cfg, "get", None)
	if not callable(getter):
		return default

	for key in keys:
		value = getter(key, None)
		if value is not None:
			return value
	return default


def _coerce_level(level: Any) -> int:
	if isinstance(level, int):
		return level

	if isinstance(level, str):
		val = level.strip().upper()
		if val.isdigit():
			return int(val)
		resolved = logging.getLevelName(val)
		if isinstance(resolved, int):
			return resolved

	return logging.INFO


def _ensure_parent_dir(path: str) -> None:
	parent = os.path.dirname(os.path.abspath(path))
	if parent:
		os.makedirs(parent, exist_ok=True)


# ---------------------------------------------------------------------------
# Test helper
# ---------------------------------------------------------------------------

def _reset_logging_for_tests() -> None:
	"""
	Remove installed handlers and forget the last configuration (unit tests only).
	"""
	global _CONFIG_SIGNATURE
	base = logging.getLogger("passgate")
	for h in _HANDLERS:
		base.removeHandler(h)
		h.close()
	_HANDLERS.clear()
	_CONFIG_SIGNATURE = None
