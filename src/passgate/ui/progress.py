# ---------------------------------------------------------------------------
# File: progress.py
# ---------------------------------------------------------------------------
# Description:
#	Text progress bar for the loading screen.
#
# Notes:
#	- filled = round(width * p), empty = width - filled, then " <percent>".
#	- Rounding is half away from zero, not Python's round().
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/13/2026	passgate dev				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from passgate.core.easing import clamp01, round_half_away

from .styles import ROLE_PROGRESS_EMPTY, ROLE_PROGRESS_FULL, ROLE_TEXT, Span


PROGRESS_BAR_WIDTH = 100
PROGRESS_FULL_CHAR = "█"
PROGRESS_EMPTY_CHAR = "░"


def progress_bar_spans(percent: float, width: int = PROGRESS_BAR_WIDTH) -> tuple[Span, ...]:
	p = clamp01(percent)

	filled = round_half_away(width * p)
	empty = width - filled

	spans: list[Span] = []
	if filled:
		spans.append(Span(PROGRESS_FULL_CHAR * filled, ROLE_PROGRESS_FULL))
	if empty:
		spans.append(Span(PROGRESS_EMPTY_CHAR * empty, ROLE_PROGRESS_EMPTY))
	spans.append(Span(f" {round_half_away(p * 100)}", ROLE_TEXT))
	return tuple(spans)


def progress_bar(percent: float, width: int = PROGRESS_BAR_WIDTH) -> str:
	"""
	Render the bar as plain text, e.g. progress_bar(0.0) -> "░" * 100 + " 0".
	"""
	return "".join(s.text for s in progress_bar_spans(percent, width))
