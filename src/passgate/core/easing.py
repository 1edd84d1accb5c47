# ---------------------------------------------------------------------------
# File: easing.py
# ---------------------------------------------------------------------------
# Description:
#	Easing and rounding helpers for the loading animation.
#
# Notes:
#	- Pure functions, no UI dependencies.
#	- Inputs are clamped to [0, 1]; ease_in_out_circ(1.0) == 1.0 exactly.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	passgate dev				Initial coding / release
# 10/15/2026	passgate dev				Add round_half_away
# ---------------------------------------------------------------------------

from __future__ import annotations

import math


def clamp01(t: float) -> float:
	if t <= 0.0:
		return 0.0
	if t >= 1.0:
		return 1.0
	return t


def ease_in_out_circ(t: float) -> float:
	"""
	Circular ease-in-out: slow start, fast middle, slow finish.
	"""
	t = clamp01(t) * 2.0
	if t < 1.0:
		return -0.5 * (math.sqrt(1.0 - t * t) - 1.0)
	t -= 2.0
	return 0.5 * (math.sqrt(1.0 - t * t) + 1.0)


def round_half_away(x: float) -> int:
	"""
	Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3).

	Python's round() is banker's rounding; the progress bar must not be.
	"""
	return int(math.copysign(math.floor(abs(x) + 0.5), x))
