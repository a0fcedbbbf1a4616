"""
=====================================
Fluent SQL statement builder package.
=====================================

Assembles a single SELECT-shaped statement from incrementally declared
clauses, plus a standalone single-row INSERT helper.

The package is organized as follows:
    - clauses.py: ClauseKind enum and the ClauseStore fragment container
    - renderer.py: Fixed-order rendering of a ClauseStore into text
    - builder.py: SqlBuilder, the chainable clause API
    - dml.py: build_insert for standalone INSERT statements
    - exceptions.py: SqlBuilderError, InvalidClauseError, ClauseOrderError

Nothing here escapes values: condition text and function code are inserted
verbatim and must be sanitized by the caller.

Example:
    >>> from sqlbuilder import SqlBuilder, build_insert
    >>>
    >>> SqlBuilder().select_all().from_table('users').where('id > 5').render()
    'SELECT * FROM `users` WHERE id > 5;'
    >>> build_insert('t', ['a', 'b'], ['1', "'x'"])
    "INSERT INTO `t` (a, b)VALUES (1, 'x');"
"""

__version__ = "1.0.0"
__all__ = [
    'SqlBuilder', 'build_insert',
    'ClauseKind', 'ClauseStore', 'render_statement',
    'SqlBuilderError', 'InvalidClauseError', 'ClauseOrderError'
]

from .builder import SqlBuilder
from .clauses import ClauseKind, ClauseStore
from .dml import build_insert
from .exceptions import ClauseOrderError, InvalidClauseError, SqlBuilderError
from .renderer import render_statement
