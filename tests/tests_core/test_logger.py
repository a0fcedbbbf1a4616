"""
Test suite for core.logger.

Tests cover:
- setup_logging: console and file handlers, levels, reconfiguration
- setup_logging_from_config: wiring to core.config
- ColoredFormatter: colored output without leaking into other handlers
- get_logger / get_module_logger
"""

import logging
from unittest.mock import patch

import pytest

from core.config import LoggingConfig
from core.logger import (
    ColoredFormatter,
    get_logger,
    get_module_logger,
    setup_logging,
    setup_logging_from_config,
)


@pytest.mark.unit
def test_setup_logging_console_only(restore_root_logger):
    """Test a single stdout handler is installed at the requested level."""
    setup_logging(log_level="warning", use_colors=False)

    root_logger = restore_root_logger
    assert root_logger.level == logging.WARNING
    assert len(root_logger.handlers) == 1
    assert isinstance(root_logger.handlers[0], logging.StreamHandler)
    assert not isinstance(root_logger.handlers[0].formatter, ColoredFormatter)


@pytest.mark.unit
def test_setup_logging_with_file(restore_root_logger, tmp_path):
    """Test file output is written to the given directory."""
    setup_logging(
        log_level="DEBUG",
        log_file="builder.log",
        log_dir=str(tmp_path / "logs"),
        console_output=False
    )

    logging.getLogger("sqlbuilder.test").debug("rendered")
    for handler in restore_root_logger.handlers:
        handler.flush()

    content = (tmp_path / "logs" / "builder.log").read_text(encoding="utf-8")
    assert "sqlbuilder.test - DEBUG - rendered" in content


@pytest.mark.unit
def test_setup_logging_replaces_handlers(restore_root_logger):
    """Test calling setup_logging twice does not duplicate handlers."""
    setup_logging(log_level="INFO")
    setup_logging(log_level="INFO")

    assert len(restore_root_logger.handlers) == 1


@pytest.mark.unit
def test_setup_logging_from_config(restore_root_logger):
    """Test config values are passed through to setup_logging."""
    settings = LoggingConfig(level="ERROR", log_file=None, log_dir="logs", use_colors=True)

    with patch("core.logger.config") as mock_config:
        mock_config.logging = settings
        setup_logging_from_config()

    assert restore_root_logger.level == logging.ERROR
    assert isinstance(restore_root_logger.handlers[0].formatter, ColoredFormatter)


@pytest.mark.unit
def test_colored_formatter_adds_color_and_restores_levelname():
    """Test the levelname is colored in output but restored on the record."""
    formatter = ColoredFormatter("%(emoji)s %(levelname)s %(message)s")
    record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom", None, None)

    output = formatter.format(record)

    assert "\033[31mERROR\033[0m" in output
    assert output.startswith("❌")
    assert record.levelname == "ERROR"


@pytest.mark.edge_case
def test_colored_formatter_unknown_level():
    """Test custom levels are formatted without color or emoji."""
    formatter = ColoredFormatter("%(emoji)s|%(levelname)s")
    record = logging.LogRecord("x", 25, __file__, 1, "note", None, None)
    record.levelname = "NOTICE"

    assert formatter.format(record) == "|NOTICE"


@pytest.mark.unit
def test_get_logger_level_override():
    """Test get_logger applies an explicit level."""
    logger = get_logger("sqlbuilder.level_test", level="debug")

    assert logger.level == logging.DEBUG
    assert get_module_logger("sqlbuilder.level_test") is logger
