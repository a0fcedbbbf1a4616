"""
Shared fixtures for core/ module tests.

Key fixtures:
- restore_root_logger: saves and restores root logger handlers and level
"""

import logging

import pytest


@pytest.fixture
def restore_root_logger():
    """Restore the root logger configuration after a test reconfigures it."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level

    yield root_logger

    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
