# ---------------------------------------------------------------------------
# File: styles.py
# ---------------------------------------------------------------------------
# Description:
#	Styled text primitives and the role -> style table for passgate.
#
# Notes:
#	- Views emit Spans tagged with a role name; they never carry colors.
#	- The style table is built once and is read-only afterwards.
#	- Colors follow the xterm-256 palette entries the screens were designed with.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/13/2026	passgate dev				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional


ROLE_TEXT = "text"
ROLE_TICKS = "ticks"
ROLE_CURSOR = "cursor"
ROLE_SUBTLE = "subtle"
ROLE_DOT = "dot"
ROLE_PLACEHOLDER = "placeholder"
ROLE_PROGRESS_FULL = "progress_full"
ROLE_PROGRESS_EMPTY = "progress_empty"


@dataclass(frozen=True, slots=True)
class Span:
	"""
	A run of text rendered with one style role.
	"""
	text: str
	role: str = ROLE_TEXT


Screen = tuple[Span, ...]


def plain_text(screen: Screen) -> str:
	return "".join(span.text for span in screen)


@dataclass(frozen=True, slots=True)
class StyleSpec:
	foreground: Optional[str] = None
	background: Optional[str] = None


DEFAULT_BACKGROUND = "#1c1c1c"

_DEFAULT_STYLES: dict[str, StyleSpec] = {
	ROLE_TEXT: StyleSpec(foreground="#d0d0d0"),
	ROLE_TICKS: StyleSpec(foreground="#5fd7af"),				# 79
	ROLE_CURSOR: StyleSpec(foreground=DEFAULT_BACKGROUND, background="#ff5faf"),	# 205
	ROLE_SUBTLE: StyleSpec(foreground="#626262"),				# 241
	ROLE_DOT: StyleSpec(foreground="#303030"),					# 236
	ROLE_PLACEHOLDER: StyleSpec(foreground="#626262"),
	ROLE_PROGRESS_FULL: StyleSpec(foreground="#00ff00"),
	ROLE_PROGRESS_EMPTY: StyleSpec(foreground="#626262"),
}

DEFAULT_STYLES: Mapping[str, StyleSpec] = MappingProxyType(_DEFAULT_STYLES)


def build_style_table(overrides: Optional[Mapping[str, StyleSpec]] = None) -> Mapping[str, StyleSpec]:
	"""
	Return a read-only style table: defaults merged with overrides.
	"""
	table = dict(_DEFAULT_STYLES)
	if overrides:
		table.update(overrides)
	return MappingProxyType(table)
