# ---------------------------------------------------------------------------
# File: test_views.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for screen rendering and the style table.
#
# Notes:
#	- Headless-safe: does NOT create any Tk widgets.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/13/2026	passgate dev				Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import replace

import pytest

from passgate.app.session import Session
from passgate.ui.progress import PROGRESS_EMPTY_CHAR, PROGRESS_FULL_CHAR
from passgate.ui.styles import (
	DEFAULT_STYLES,
	ROLE_TICKS,
	StyleSpec,
	build_style_table,
	plain_text,
)
from passgate.ui.views import FAREWELL_TEXT, PROMPT_TEXT, VERIFYING_TEXT, render_screen


def test_quitting_shows_farewell_only():
	s = Session(quitting=True, entered=True, loaded=True)

	assert plain_text(render_screen(s)) == FAREWELL_TEXT


def test_entry_view_contents():
	s = Session(ticks=42)
	s = replace(s, password=s.password.insert("abc"))

	text = plain_text(render_screen(s))

	assert text.startswith(PROMPT_TEXT)
	assert ">> ••• " in text
	assert "abc" not in text
	assert "Program quits in 42 seconds" in text
	assert "enter: submit • ctrl+c, esc: quit" in text


def test_entry_view_styles_countdown():
	screen = render_screen(Session(ticks=7))

	ticks = [span for span in screen if span.role == ROLE_TICKS]
	assert [span.text for span in ticks] == ["7"]


def test_loading_view():
	s = Session(entered=True, frames=50, progress=0.5)

	text = plain_text(render_screen(s))
	label, bar = text.split("\n")

	assert label == VERIFYING_TEXT
	assert bar == PROGRESS_FULL_CHAR * 50 + PROGRESS_EMPTY_CHAR * 50 + " 50%"


def test_success_view():
	s = Session(entered=True, loaded=True, frames=100, progress=1.0, ticks=3)

	text = plain_text(render_screen(s))

	assert text.startswith("Successful. Exiting in 3 seconds...\n")
	assert text.endswith(PROGRESS_FULL_CHAR * 100 + " 100%")


def test_render_is_pure():
	s = Session(entered=True, progress=0.25)

	assert render_screen(s) == render_screen(s)


def test_style_table_is_read_only():
	with pytest.raises(TypeError):
		DEFAULT_STYLES["ticks"] = StyleSpec(foreground="#fff")  # type: ignore[index]


def test_build_style_table_overrides():
	table = build_style_table({ROLE_TICKS: StyleSpec(foreground="#ffffff")})

	assert table[ROLE_TICKS].foreground == "#ffffff"
	assert DEFAULT_STYLES[ROLE_TICKS].foreground != "#ffffff"
	assert set(DEFAULT_STYLES) <= set(table)
