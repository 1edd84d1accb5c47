# ---------------------------------------------------------------------------
# File: config.py
# ---------------------------------------------------------------------------
# Description:
#	Configuration wrappers for passgate.
#
# Notes:
#	- AppConfig is the raw cfg mapping (host + logging + telemetry keys).
#	- SessionSettings is the validated, immutable view the state machine uses.
#	- No config files or environment variables are read here; cfg is
#	  whatever the caller hands to App / main().
#
#	Supported session keys:
#		"secret"			(default: "password")
#		"entry_timeout"		(default: 100)
#		"success_countdown"	(default: 3)
#		"total_frames"		(default: 100)
#		"frame_rate"		(default: 60)
#		"tick_interval"		(default: 1.0)
#		"bar_width"			(default: 100)
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	passgate dev				Initial coding / release
# 10/14/2026	passgate dev				Move AppConfig out of app.py
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


DEFAULT_SECRET = "password"


@dataclass(frozen=True, slots=True)
class AppConfig:
	"""
	Light wrapper for config options.

	Accepts None, a dict, or another AppConfig (re-wrapping is a no-op copy).
	"""
	options: dict[str, Any] | None = None

	def get(self, key: str, default: Any = None) -> Any:
		if self.options is None:
			return default
		return self.options.get(key, default)

	@classmethod
	def wrap(cls, cfg: "AppConfig | dict[str, Any] | None") -> "AppConfig":
		if isinstance(cfg, AppConfig):
			return cfg
		return cls(dict(cfg) if cfg is not None else None)


@dataclass(frozen=True, slots=True)
class SessionSettings:
	"""
	SessionSettings

	Timing and authentication constants for one session.
	"""
	secret: str = DEFAULT_SECRET
	entry_timeout: int = 100
	success_countdown: int = 3
	total_frames: int = 100
	frame_rate: int = 60
	tick_interval: float = 1.0
	bar_width: int = 100

	def __post_init__(self) -> None:
		if not isinstance(self.secret, str):
			raise ValueError("secret must be a string")
		if self.entry_timeout < 0:
			raise ValueError(f"entry_timeout must be >= 0, got {self.entry_timeout!r}")
		if self.success_countdown < 0:
			raise ValueError(f"success_countdown must be >= 0, got {self.success_countdown!r}")
		if self.total_frames <= 0:
			raise ValueError(f"total_frames must be > 0, got {self.total_frames!r}")
		if self.frame_rate <= 0:
			raise ValueError(f"frame_rate must be > 0, got {self.frame_rate!r}")
		if self.tick_interval <= 0:
			raise ValueError(f"tick_interval must be > 0, got {self.tick_interval!r}")
		if self.bar_width <= 0:
			raise ValueError(f"bar_width must be > 0, got {self.bar_width!r}")

	@property
	def frame_interval(self) -> float:
		return 1.0 / self.frame_rate

	@classmethod
	def from_config(cls, cfg: "AppConfig | dict[str, Any] | None" = None) -> "SessionSettings":
		"""
		Build settings from a cfg mapping, falling back to defaults per key.
		"""
		c = AppConfig.wrap(cfg)
		d = cls()
		return cls(
			secret=c.get("secret", d.secret),
			entry_timeout=int(c.get("entry_timeout", d.entry_timeout)),
			success_countdown=int(c.get("success_countdown", d.success_countdown)),
			total_frames=int(c.get("total_frames", d.total_frames)),
			frame_rate=int(c.get("frame_rate", d.frame_rate)),
			tick_interval=float(c.get("tick_interval", d.tick_interval)),
			bar_width=int(c.get("bar_width", d.bar_width)),
		)
