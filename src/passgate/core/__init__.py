# ---------------------------------------------------------------------------
# File: __init__.py
# ---------------------------------------------------------------------------
# Description:
#	Core package for passgate (config, easing, logging, telemetry).
#
# Notes:
#	No Tk imports here; everything in core is headless.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	passgate dev				Initial coding / release
# 10/13/2026	passgate dev				Export telemetry functions
# ---------------------------------------------------------------------------

from __future__ import annotations

from .config import AppConfig, SessionSettings
from .easing import ease_in_out_circ, round_half_away
from .logging import init_logging, get_logger, get_app_logger
from .telemetry import init_telemetry, get_telemetry

__all__ = [
	"AppConfig",
	"SessionSettings",
	"ease_in_out_circ",
	"round_half_away",
	"get_logger",
	"get_app_logger",
	"init_logging",
	"init_telemetry",
	"get_telemetry",
]
