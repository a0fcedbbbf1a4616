"""
=============================
Standalone INSERT statements.
=============================

Builds a single-row INSERT statement from pre-formatted column and value
fragments. Independent of any SqlBuilder state.

Columns and values are joined verbatim: quoting values (e.g. wrapping
strings in single quotes) is the caller's job and nothing is escaped.

Usage:
    from sqlbuilder.dml import build_insert

    insert_sql = build_insert('users', ['id', 'name'], ['1', "'Ann'"])
    # INSERT INTO `users` (id, name)VALUES (1, 'Ann');
"""

from typing import Sequence

from sqlbuilder.clauses import quote_identifier


def build_insert(table: str, columns: Sequence[str], values: Sequence[str]) -> str:
    """
    Generate a single-row INSERT statement.

    The column list is followed directly by VALUES with no separating
    space; existing consumers match on that exact text.

    Args:
        table: Target table name (backtick quoted)
        columns: Column fragments, joined with ", " as given
        values: Value fragments, joined with ", " as given

    Returns:
        SQL INSERT statement
    """
    column_list = ', '.join(columns)
    value_list = ', '.join(values)
    return (
        f"INSERT INTO {quote_identifier(table)} ({column_list})"
        f"VALUES ({value_list});"
    )
