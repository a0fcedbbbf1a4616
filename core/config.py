"""
=============================================
Configuration management for the SQL builder.
=============================================

Loads settings from environment variables (.env file) and provides a
centralized Config singleton for application-wide access.

Only the logging setup reads this configuration. SqlBuilder itself never
consults the environment, so rendered statements do not depend on it.

Environment variables:
    SQLBUILDER_LOG_LEVEL: Root log level (default INFO)
    SQLBUILDER_LOG_FILE: Optional log file name (default: no file output)
    SQLBUILDER_LOG_DIR: Directory for the log file (default logs)
    SQLBUILDER_LOG_COLORS: Colored console output (default true)

Example:
    >>> from core.config import config
    >>>
    >>> print(f"Log level: {config.log_level}")
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(dotenv_path=env_path)

_TRUE_VALUES = ('1', 'true', 'yes', 'on')


@dataclass
class LoggingConfig:
    """Logging configuration settings.

    Attributes:
        level: Logging level name (DEBUG/INFO/WARNING/ERROR/CRITICAL)
        log_file: Optional log file name; None disables file output
        log_dir: Directory the log file is written to
        use_colors: If True, console output is colored
    """

    level: str
    log_file: Optional[str]
    log_dir: str
    use_colors: bool

    def get_setup_params(self) -> dict:
        """Get keyword arguments for core.logger.setup_logging().

        Returns:
            Dictionary with keys: log_level, log_file, log_dir, use_colors
        """
        return {
            'log_level': self.level,
            'log_file': self.log_file,
            'log_dir': self.log_dir,
            'use_colors': self.use_colors
        }


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in _TRUE_VALUES


class Config:
    """Centralized configuration manager.

    Attributes:
        logging: LoggingConfig instance with logging settings

    Properties:
        log_level: Root log level name
        log_file: Optional log file name

    Example:
        >>> config = Config()
        >>> params = config.logging.get_setup_params()
    """

    def __init__(self):
        """Initialize configuration from environment variables."""
        self.logging = LoggingConfig(
            level=os.getenv('SQLBUILDER_LOG_LEVEL', 'INFO').upper(),
            log_file=os.getenv('SQLBUILDER_LOG_FILE') or None,
            log_dir=os.getenv('SQLBUILDER_LOG_DIR', 'logs'),
            use_colors=_env_flag('SQLBUILDER_LOG_COLORS', 'true')
        )

    @property
    def log_level(self) -> str:
        """Get root log level name."""
        return self.logging.level

    @property
    def log_file(self) -> Optional[str]:
        """Get log file name, or None when file logging is disabled."""
        return self.logging.log_file


# Global configuration instance
config = Config()
