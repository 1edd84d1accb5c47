# ---------------------------------------------------------------------------
# File: test_easing.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for passgate.core.easing.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	passgate dev				Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

import pytest

from passgate.core.easing import clamp01, ease_in_out_circ, round_half_away


def test_ease_endpoints_are_exact():
	assert ease_in_out_circ(0.0) == 0.0
	assert ease_in_out_circ(0.5) == 0.5
	assert ease_in_out_circ(1.0) == 1.0


def test_ease_is_non_decreasing_over_frames():
	values = [ease_in_out_circ(f / 100) for f in range(101)]

	assert all(b >= a for a, b in zip(values, values[1:]))
	assert values[-1] == 1.0
	assert all(v < 1.0 for v in values[:-1])


def test_ease_is_slow_fast_slow():
	start = ease_in_out_circ(0.1) - ease_in_out_circ(0.0)
	middle = ease_in_out_circ(0.55) - ease_in_out_circ(0.45)
	end = ease_in_out_circ(1.0) - ease_in_out_circ(0.9)

	assert middle > start
	assert middle > 0.1
	# symmetric around the midpoint
	assert ease_in_out_circ(0.2) == pytest.approx(1.0 - ease_in_out_circ(0.8))
	assert start == pytest.approx(end)


def test_ease_clamps_out_of_range_input():
	assert ease_in_out_circ(-0.5) == 0.0
	assert ease_in_out_circ(1.5) == 1.0
	assert clamp01(2.0) == 1.0
	assert clamp01(-1.0) == 0.0
	assert clamp01(0.25) == 0.25


def test_round_half_away_from_zero():
	assert round_half_away(0.5) == 1
	assert round_half_away(1.5) == 2
	assert round_half_away(2.5) == 3
	assert round_half_away(-2.5) == -3
	assert round_half_away(2.4) == 2
	assert round_half_away(0.0) == 0
