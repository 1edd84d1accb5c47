# ---------------------------------------------------------------------------
# File: component.py
# ---------------------------------------------------------------------------
# Description:
#	Base Tk component for passgate.
#
# Notes:
#	- mount() builds self.root under a parent; layout() packs it.
#	- Subclasses override build() (and optionally layout()).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/13/2026	passgate dev				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional
from uuid import uuid4

import tkinter as tk
from tkinter import ttk


@dataclass
class Component:
	"""
	Base UI component.

	- id:	Stable identifier (auto-generated when omitted).
	- name:	Human-friendly label (defaults to class name).
	"""
	id: Optional[str] = None
	name: Optional[str] = None

	# tk.Misc is the common base for Tk, Toplevel, and all widgets.
	parent: Optional[tk.Misc] = field(default=None, init=False, repr=False)
	root: Optional[tk.Widget] = field(default=None, init=False, repr=False)

	def __post_init__(self) -> None:
		if not self.id:
			self.id = str(uuid4())
		if not self.name:
			self.name = self.__class__.__name__

	@property
	def mounted(self) -> bool:
		return self.root is not None

	def mount(self, parent: tk.Misc) -> None:
		self.parent = parent
		self.root = self.build(parent)

	def build(self, parent: tk.Misc) -> tk.Widget:
		return ttk.Frame(parent)

	def layout(self) -> None:
		if self.root is None:
			return
		self.root.pack(fill="both", expand=True)

	def destroy(self) -> None:
		if self.root is not None:
			self.root.destroy()
			self.root = None
