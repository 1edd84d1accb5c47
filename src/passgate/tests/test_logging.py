# ---------------------------------------------------------------------------
# File: test_logging.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for passgate.core.logging.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/16/2026	passgate dev				Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging

import pytest

from passgate.core import logging as plog
from passgate.core.config import AppConfig


@pytest.fixture(autouse=True)
def _reset():
	plog._reset_logging_for_tests()
	yield
	plog._reset_logging_for_tests()


def _base() -> logging.Logger:
	return logging.getLogger("passgate")


def test_app_logger_names():
	assert plog.get_app_logger().name == "passgate.app"
	assert plog.get_app_logger("runner").name == "passgate.app.runner"


def test_init_is_idempotent():
	before = len(_base().handlers)

	plog.init_logging({"log_level": "DEBUG"})
	plog.init_logging({"log_level": "DEBUG"})

	assert len(_base().handlers) == before + 1
	assert _base().level == logging.DEBUG


def test_reconfigure_replaces_handlers():
	before = len(_base().handlers)

	plog.init_logging({"log_level": "DEBUG"})
	plog.init_logging({"logging.level": "WARNING"})

	assert len(_base().handlers) == before + 1
	assert _base().level == logging.WARNING


def test_console_can_be_disabled():
	before = len(_base().handlers)

	plog.init_logging(AppConfig({"log_console": False}))

	assert len(_base().handlers) == before


def test_file_handler(tmp_path):
	log_file = tmp_path / "logs" / "passgate.log"

	plog.init_logging({"log_console": False, "log_file": str(log_file), "log_level": "INFO"})
	plog.get_app_logger("test").info("hello file")

	for h in _base().handlers:
		h.flush()

	assert "hello file" in log_file.read_text(encoding="utf-8")


@pytest.mark.parametrize(
	"raw,expected",
	[
		("debug", logging.DEBUG),
		(" Warning ", logging.WARNING),
		("10", 10),
		(logging.ERROR, logging.ERROR),
		("bogus", logging.INFO),
		(None, logging.INFO),
	],
)
def test_coerce_level(raw, expected):
	assert plog._coerce_level(raw) == expected
