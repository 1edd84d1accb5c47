# ---------------------------------------------------------------------------
# File: views.py
# ---------------------------------------------------------------------------
# Description:
#	Screen rendering for passgate: Session -> Screen (styled spans).
#
# Notes:
#	- Pure functions of state; safe to call after every update.
#	- Text is fixed (no i18n); colors come from the style table, not here.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/13/2026	passgate dev				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING

from .progress import PROGRESS_BAR_WIDTH, progress_bar_spans
from .styles import ROLE_DOT, ROLE_SUBTLE, ROLE_TEXT, ROLE_TICKS, Screen, Span

if TYPE_CHECKING:
	from passgate.app.session import Session


FAREWELL_TEXT = "\n  See you later!\n\n"
PROMPT_TEXT = "Enter the password to sign in:"
VERIFYING_TEXT = "Password verification..."
DOT_TEXT = " • "


def render_screen(session: "Session", *, bar_width: int = PROGRESS_BAR_WIDTH) -> Screen:
	if session.quitting:
		return (Span(FAREWELL_TEXT, ROLE_TEXT),)

	if not session.entered:
		return entry_view(session)
	return entered_view(session, bar_width=bar_width)


def entry_view(session: "Session") -> Screen:
	return (
		Span(f"{PROMPT_TEXT}\n\n", ROLE_TEXT),
		*session.password.render_spans(),
		Span("\n\nProgram quits in ", ROLE_TEXT),
		Span(str(session.ticks), ROLE_TICKS),
		Span(" seconds\n\n", ROLE_TEXT),
		Span("enter: submit", ROLE_SUBTLE),
		Span(DOT_TEXT, ROLE_DOT),
		Span("ctrl+c, esc: quit", ROLE_SUBTLE),
	)


def entered_view(session: "Session", *, bar_width: int = PROGRESS_BAR_WIDTH) -> Screen:
	if session.loaded:
		label: tuple[Span, ...] = (
			Span("Successful. Exiting in ", ROLE_TEXT),
			Span(str(session.ticks), ROLE_TICKS),
			Span(" seconds...", ROLE_TEXT),
		)
	else:
		label = (Span(VERIFYING_TEXT, ROLE_TEXT),)

	return (
		*label,
		Span("\n", ROLE_TEXT),
		*progress_bar_spans(session.progress, bar_width),
		Span("%", ROLE_TEXT),
	)
