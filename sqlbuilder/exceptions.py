"""
=================================
Exceptions raised by the builder.
=================================

Two kinds of failure are distinguished:

    InvalidClauseError: a required identifier, condition or code string is
        blank, or parallel inputs (columns vs. aliases) differ in length.
    ClauseOrderError: a call arrived in an order the builder cannot accept,
        e.g. a JOIN requested before any FROM table was declared.

Both derive from SqlBuilderError, and from the matching built-in exception
(ValueError / RuntimeError) so callers can catch either.
"""


class SqlBuilderError(Exception):
    """Base exception for all statement builder errors."""
    pass


class InvalidClauseError(SqlBuilderError, ValueError):
    """Exception raised when a clause argument is blank or malformed."""
    pass


class ClauseOrderError(SqlBuilderError, RuntimeError):
    """Exception raised when a clause is added before its prerequisite.

    Signals a call-ordering defect rather than a bad value.
    """
    pass
