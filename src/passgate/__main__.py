from __future__ import annotations

import tkinter as tk
from typing import Any

from passgate.core import get_app_logger, init_logging, init_telemetry


def main(cfg: dict[str, Any] | None = None) -> int:
	"""
	Run one passgate session.

	A window that cannot be created (no display, broken Tk) is reported on
	stdout and still exits 0.
	"""
	cfg = cfg or {}
	init_logging(cfg)
	log = get_app_logger()
	telemetry = init_telemetry(cfg, logger=get_app_logger("telemetry"))

	from passgate.app import App

	try:
		app = App(cfg=cfg, telemetry=telemetry)
	except tk.TclError as ex:
		log.error("Startup failed: %s", ex)
		print("could not start program:", ex)
		return 0

	app.run()
	return 0


if __name__ == "__main__":
	raise SystemExit(main())
