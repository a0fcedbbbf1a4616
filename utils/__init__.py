"""
==========================
Utility Functions Package.
==========================

Helpers for handing rendered statements to database collaborators.

Modules:
    statement_utils: Statement checks and SQLAlchemy text() wrapping
"""

__version__ = "1.0.0"
__all__ = [
    'StatementHandOffError',
    'require_statement',
    'to_text_clause'
]

from .statement_utils import (
    StatementHandOffError,
    require_statement,
    to_text_clause,
)
