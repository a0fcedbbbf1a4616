"""
========================================
Core infrastructure for the SQL builder.
========================================

This package provides configuration management and logging infrastructure
for applications embedding the builder.

Modules:
    config: Configuration management from environment variables
    logger: Centralized logging configuration and utilities

Example:
    >>> from core.config import config
    >>> from core.logger import get_logger
    >>>
    >>> logger = get_logger(__name__)
    >>> logger.info(f"Log level is {config.log_level}")
"""

__version__ = "1.0.0"
__all__ = [
    'get_logger', 'setup_logging', 'setup_logging_from_config',
    'get_module_logger', 'config', 'Config'
]

from core.config import Config, config
from core.logger import (
    get_logger,
    get_module_logger,
    setup_logging,
    setup_logging_from_config,
)
