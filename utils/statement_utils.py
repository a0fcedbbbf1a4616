"""
=========================================
Hand-off helpers for rendered statements.
=========================================

Rendered statements are plain strings. These helpers prepare them for an
external SQLAlchemy collaborator without opening a connection or executing
anything; running the statement stays the caller's responsibility.

Key Features:
    - Terminated-statement check before hand-off
    - Wrapping in sqlalchemy.text() for Connection.execute()

SQLAlchemy treats colon-prefixed words in the text (e.g. ":name") as bind
parameters; their values are supplied at execute() time.

Example:
    >>> from sqlbuilder import SqlBuilder
    >>> from utils.statement_utils import to_text_clause
    >>>
    >>> clause = to_text_clause(SqlBuilder().select_all().from_table('users'))
    >>> # with engine.connect() as conn:
    >>> #     rows = conn.execute(clause).fetchall()
"""

import logging
from typing import Union

from sqlalchemy import text
from sqlalchemy.sql.elements import TextClause

from sqlbuilder.builder import SqlBuilder
from sqlbuilder.renderer import STATEMENT_TERMINATOR

logger = logging.getLogger(__name__)


class StatementHandOffError(Exception):
    """Exception raised when a statement is not fit to hand off."""
    pass


def require_statement(statement: str) -> str:
    """
    Check that a string is a non-empty, terminated statement.

    Args:
        statement: Rendered statement text

    Returns:
        The statement, unchanged

    Raises:
        StatementHandOffError: If the statement is empty or holds only the
            terminator, or does not end with the terminator
    """
    if not isinstance(statement, str):
        raise StatementHandOffError(
            f"Expected statement text, got {type(statement).__name__}"
        )

    stripped = statement.strip()
    if not stripped or stripped == STATEMENT_TERMINATOR:
        raise StatementHandOffError("Cannot hand off an empty statement.")
    if not stripped.endswith(STATEMENT_TERMINATOR):
        raise StatementHandOffError(
            f"Statement is not terminated with '{STATEMENT_TERMINATOR}': {stripped}"
        )

    return statement


def to_text_clause(statement: Union[str, SqlBuilder]) -> TextClause:
    """
    Wrap a rendered statement for execution through SQLAlchemy.

    Args:
        statement: Statement text, or a builder to render first

    Returns:
        sqlalchemy TextClause for the statement

    Raises:
        StatementHandOffError: If the statement fails require_statement()
    """
    if isinstance(statement, SqlBuilder):
        statement = statement.render()

    require_statement(statement)
    logger.debug(f"Prepared statement for execution: {statement}")
    return text(statement)
