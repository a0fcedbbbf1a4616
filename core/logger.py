"""
========================================
Centralized logging for the SQL builder.
========================================

Provides consistent logging setup across all modules with:
- Console output, colored with level emojis when enabled
- Optional UTF-8 file output
- Defaults taken from core.config (SQLBUILDER_LOG_* variables)

Library modules only ever call logging.getLogger(__name__); handlers are
configured here, once, by the application.

Example:
    >>> from core.logger import get_logger, setup_logging
    >>>
    >>> setup_logging(log_level='DEBUG', log_file='sqlbuilder.log')
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering statement")
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from core.config import config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class ColoredFormatter(logging.Formatter):
    """Formatter adding ANSI colors and emoji indicators to console output.

    Attributes:
        COLORS: Dict mapping log levels to ANSI color codes
        EMOJI: Dict mapping log levels to emoji indicators
    """

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'        # Reset
    }

    EMOJI = {
        'DEBUG': '🔍',
        'INFO': 'ℹ️ ',
        'WARNING': '⚠️ ',
        'ERROR': '❌',
        'CRITICAL': '🔥'
    }

    def format(self, record):
        """Format a record with colors and emoji.

        The record's levelname is restored afterwards so other handlers
        sharing the record see the plain name.
        """
        levelname = record.levelname
        record.emoji = self.EMOJI.get(levelname, '')
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.COLORS['RESET']}"

        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Get a logger instance for the specified module.

    Args:
        name: Logger name (typically __name__ of calling module)
        level: Optional logging level override (DEBUG/INFO/WARNING/ERROR/CRITICAL)

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)

    if level:
        logger.setLevel(getattr(logging, level.upper()))

    return logger


def setup_logging(
    log_level: str = 'INFO',
    log_file: Optional[str] = None,
    log_dir: Optional[str] = None,
    console_output: bool = True,
    use_colors: bool = True
) -> None:
    """Configure the root logger with console and/or file handlers.

    Existing root handlers are replaced, so calling it again reconfigures
    logging rather than duplicating output.

    Args:
        log_level: Logging level (DEBUG/INFO/WARNING/ERROR/CRITICAL)
        log_file: Optional log file name (e.g., 'sqlbuilder.log')
        log_dir: Optional log directory path (defaults to 'logs/')
        console_output: If True, output to console (stdout)
        use_colors: If True, use colored output for console

    Example:
        >>> setup_logging(log_level='DEBUG', log_file='sqlbuilder.log', log_dir='logs')
    """
    level = getattr(logging, log_level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)

        if use_colors:
            console_formatter = ColoredFormatter(
                '%(emoji)s ' + LOG_FORMAT,
                datefmt=DATE_FORMAT
            )
        else:
            console_formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

        console_handler.setFormatter(console_formatter)
        root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_dir) if log_dir else Path('logs')
        log_path.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path / log_file, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(file_handler)


def setup_logging_from_config() -> None:
    """Configure logging from the SQLBUILDER_LOG_* settings in core.config."""
    setup_logging(**config.logging.get_setup_params())


def get_module_logger(module_name: str) -> logging.Logger:
    """Get a logger for a specific module (typically __name__)."""
    return logging.getLogger(module_name)


def _init_default_logging():
    """Initialize logging from config if no root handlers exist yet."""
    if not logging.getLogger().handlers:
        setup_logging_from_config()


# Auto-initialize on import
_init_default_logging()
