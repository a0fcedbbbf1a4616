"""
================================
Fluent SELECT statement builder.
================================

SqlBuilder accumulates SELECT, FROM, JOIN, WHERE, GROUP BY, HAVING and
SORT BY clauses through chainable calls and renders them into one
statement on demand.

Clause methods:
    select_all, select_column, select_columns, select_function
    from_table, inner_join, left_join, right_join
    where, and_condition, or_condition
    group_by, group_by_table_column
    having
    sort_by, sort_by_table_column

Rendering:
    render: Assemble the statement and remember it as the current query
    current_query: Last rendered statement ('' before the first render)

Security:
    Table and column names are wrapped in backticks but never escaped.
    Condition text (WHERE, HAVING, JOIN ... ON) and function code are
    inserted verbatim. Callers must sanitize every value they embed; this
    builder provides no protection against SQL injection.

Example:
    >>> from sqlbuilder import SqlBuilder
    >>>
    >>> builder = (
    ...     SqlBuilder()
    ...     .select_column('users', 'id')
    ...     .select_column('users', 'name', 'n')
    ...     .from_table('users')
    ...     .where('id > 5')
    ...     .group_by('name')
    ... )
    >>> builder.render()
    'SELECT `users`.`id`, `users`.`name` n FROM `users` WHERE id > 5 GROUP BY `name`;'
"""

import logging
import threading
from typing import Dict, Optional, Sequence, Tuple

from sqlbuilder.clauses import (
    ClauseKind,
    ClauseStore,
    is_blank,
    quote_identifier,
    table_column,
)
from sqlbuilder.dml import build_insert
from sqlbuilder.exceptions import ClauseOrderError, InvalidClauseError
from sqlbuilder.renderer import render_statement

logger = logging.getLogger(__name__)

JOIN_KEYWORDS = {
    ClauseKind.INNER_JOIN: 'INNER JOIN',
    ClauseKind.LEFT_JOIN: 'LEFT JOIN',
    ClauseKind.RIGHT_JOIN: 'RIGHT JOIN',
}


def _require(value: Optional[str], message: str) -> None:
    """Raise InvalidClauseError with the given message if value is blank."""
    if is_blank(value):
        logger.debug(f"Rejected clause argument: {message}")
        raise InvalidClauseError(message)


class SqlBuilder:
    """Fluent builder for a single SELECT-shaped statement.

    Every clause method validates its arguments before touching the clause
    store and returns the builder, so calls can be chained. A failed call
    raises immediately and leaves the builder unchanged.

    Access to one builder is serialized with a re-entrant lock, so a
    render() never sees a half-applied mutation. Sharing a builder between
    threads is still discouraged: use one builder per statement.

    Attributes:
        clauses: Read-only snapshot of the accumulated fragments

    Example:
        >>> sql = (
        ...     SqlBuilder()
        ...     .select_all()
        ...     .from_table('orders', 'o')
        ...     .inner_join('customers', 'c', 'c.id = o.customer_id')
        ...     .where("o.status = 'open'")
        ...     .render()
        ... )
    """

    def __init__(self):
        """Initialize an empty builder."""
        self._store = ClauseStore()
        self._query = ''
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # SELECT
    # ------------------------------------------------------------------

    def select_all(self) -> 'SqlBuilder':
        """Select every column ("SELECT *"), replacing prior selections."""
        with self._lock:
            self._store.replace(ClauseKind.SELECT, ['*'])
        return self

    def select_column(self, table: str, column: str, alias: Optional[str] = None) -> 'SqlBuilder':
        """
        Add a table's column to the SELECT clause.

        Args:
            table: Name of the table the column belongs to
            column: Column name
            alias: Optional alias written after the column

        Returns:
            This builder, for chaining

        Raises:
            InvalidClauseError: If table or column is blank
        """
        _require(table, 'Cannot add unnamed table to the SELECT clause.')
        _require(column, 'Cannot add unnamed column to the SELECT clause.')

        fragment = table_column(table, column)
        if not is_blank(alias):
            fragment += f" {alias}"

        with self._lock:
            self._store.append(ClauseKind.SELECT, fragment)
        return self

    def select_columns(
        self,
        table: str,
        columns: Sequence[str],
        aliases: Optional[Sequence[Optional[str]]] = None
    ) -> 'SqlBuilder':
        """
        Add several columns of one table to the SELECT clause.

        Equivalent to calling select_column() once per column/alias pair.
        If any column is rejected, none of them are added.

        Args:
            table: Name of the table the columns belong to
            columns: Column names
            aliases: One alias per column (blank for none); omit for no aliases

        Returns:
            This builder, for chaining

        Raises:
            InvalidClauseError: If columns and aliases differ in length, or a
                table/column name is blank (per-column error chained as cause)
        """
        columns = list(columns)
        aliases = [None] * len(columns) if aliases is None else list(aliases)

        if len(columns) != len(aliases):
            message = (
                'Column names and aliases cannot be of different lengths '
                f'(names = {len(columns)}, aliases = {len(aliases)})'
            )
            logger.debug(f"Rejected clause argument: {message}")
            raise InvalidClauseError(message)

        with self._lock:
            selected = len(self._store.fragments(ClauseKind.SELECT))
            try:
                for column, alias in zip(columns, aliases):
                    self.select_column(table, column, alias)
            except InvalidClauseError as exc:
                self._store.truncate(ClauseKind.SELECT, selected)
                raise InvalidClauseError('Could not add table column to SELECT clause.') from exc
        return self

    def select_function(self, code: str) -> 'SqlBuilder':
        """
        Add raw expression code (e.g. "MAX(`price`)") to the SELECT clause.

        The code is inserted verbatim, without quoting or escaping.

        Raises:
            InvalidClauseError: If code is blank
        """
        _require(code, 'No code given for the SELECT clause.')
        with self._lock:
            self._store.append(ClauseKind.SELECT, code)
        return self

    # Names used by earlier releases
    select_table_column = select_column
    select_table_columns = select_columns

    # ------------------------------------------------------------------
    # FROM / JOIN
    # ------------------------------------------------------------------

    def from_table(self, table: str, alias: Optional[str] = None) -> 'SqlBuilder':
        """
        Add a table to the FROM clause.

        Args:
            table: Table name
            alias: Optional alias, rendered as "AS alias"

        Returns:
            This builder, for chaining

        Raises:
            InvalidClauseError: If table is blank
        """
        _require(table, 'Cannot add unnamed table to FROM clause.')

        fragment = quote_identifier(table)
        if not is_blank(alias):
            fragment += f" AS {alias}"

        with self._lock:
            self._store.append(ClauseKind.FROM, fragment)
        return self

    def inner_join(self, table: str, alias: Optional[str], condition: str) -> 'SqlBuilder':
        """Add an INNER JOIN. See _join() for arguments and errors."""
        return self._join(ClauseKind.INNER_JOIN, table, alias, condition)

    def left_join(self, table: str, alias: Optional[str], condition: str) -> 'SqlBuilder':
        """Add a LEFT JOIN. See _join() for arguments and errors."""
        return self._join(ClauseKind.LEFT_JOIN, table, alias, condition)

    def right_join(self, table: str, alias: Optional[str], condition: str) -> 'SqlBuilder':
        """Add a RIGHT JOIN. See _join() for arguments and errors."""
        return self._join(ClauseKind.RIGHT_JOIN, table, alias, condition)

    def _join(
        self,
        kind: ClauseKind,
        table: str,
        alias: Optional[str],
        condition: str
    ) -> 'SqlBuilder':
        """
        Add a join of the given kind.

        Args:
            kind: One of the join clause kinds
            table: Name of the table to join
            alias: Optional alias for the joined table
            condition: ON condition, inserted verbatim

        Returns:
            This builder, for chaining

        Raises:
            InvalidClauseError: If table or condition is blank
            ClauseOrderError: If no FROM table has been added yet
        """
        _require(table, 'Cannot join unnamed table.')
        _require(condition, 'Cannot perform join based upon no condition.')

        fragment = f"{JOIN_KEYWORDS[kind]} {quote_identifier(table)}"
        if not is_blank(alias):
            fragment += f" AS {alias}"
        fragment += f" ON {condition}"

        with self._lock:
            if self._store.is_empty(ClauseKind.FROM):
                message = 'Cannot perform join when no other table has been specified, so far.'
                logger.debug(f"Rejected {JOIN_KEYWORDS[kind]} of '{table}': {message}")
                raise ClauseOrderError(message)
            self._store.append(kind, fragment)
        return self

    # ------------------------------------------------------------------
    # WHERE
    # ------------------------------------------------------------------

    def where(self, condition: str) -> 'SqlBuilder':
        """
        Set the WHERE condition, discarding any previous conditions.

        Use and_condition() / or_condition() to extend it instead.

        Raises:
            InvalidClauseError: If condition is blank
        """
        _require(condition, 'Cannot check against an empty condition.')
        with self._lock:
            self._store.replace(ClauseKind.WHERE, [condition])
        return self

    def and_condition(self, condition: str) -> 'SqlBuilder':
        """
        Add a WHERE condition joined with AND.

        The first condition is added without a connective.

        Raises:
            InvalidClauseError: If condition is blank
        """
        _require(condition, 'Cannot add empty AND clause.')
        with self._lock:
            self._store.append_with_connective(ClauseKind.WHERE, condition, 'AND')
        return self

    def or_condition(self, condition: str) -> 'SqlBuilder':
        """
        Add a WHERE condition joined with OR.

        The first condition is added without a connective.

        Raises:
            InvalidClauseError: If condition is blank
        """
        _require(condition, 'Cannot add empty OR clause.')
        with self._lock:
            self._store.append_with_connective(ClauseKind.WHERE, condition, 'OR')
        return self

    # ------------------------------------------------------------------
    # GROUP BY / HAVING / SORT BY
    # ------------------------------------------------------------------

    def group_by(self, column: str) -> 'SqlBuilder':
        """Add a column to the GROUP BY clause."""
        _require(column, 'Cannot group by an unnamed column.')
        with self._lock:
            self._store.append(ClauseKind.GROUP_BY, quote_identifier(column))
        return self

    def group_by_table_column(self, table: str, column: str) -> 'SqlBuilder':
        """Add a table-qualified column to the GROUP BY clause."""
        _require(table, 'Cannot group by a column of an unnamed table.')
        _require(column, 'Cannot group by an unnamed column.')
        with self._lock:
            self._store.append(ClauseKind.GROUP_BY, table_column(table, column))
        return self

    def having(self, condition: str, connective: str = 'AND') -> 'SqlBuilder':
        """
        Add a HAVING condition.

        Args:
            condition: Condition text, inserted verbatim
            connective: Keyword joining it to earlier HAVING conditions

        Returns:
            This builder, for chaining

        Raises:
            InvalidClauseError: If condition is blank, or connective is blank
                when earlier HAVING conditions exist
        """
        _require(condition, 'Cannot add an empty condition to the HAVING clause.')
        with self._lock:
            self._store.append_with_connective(ClauseKind.HAVING, condition, connective)
        return self

    def sort_by(self, column: str) -> 'SqlBuilder':
        """Add a column to the SORT BY clause."""
        _require(column, 'Cannot sort by an unnamed column.')
        with self._lock:
            self._store.append(ClauseKind.SORT_BY, quote_identifier(column))
        return self

    def sort_by_table_column(self, table: str, column: str) -> 'SqlBuilder':
        """Add a table-qualified column to the SORT BY clause."""
        _require(table, 'Cannot sort by a column of an unnamed table.')
        _require(column, 'Cannot sort by an unnamed column.')
        with self._lock:
            self._store.append(ClauseKind.SORT_BY, table_column(table, column))
        return self

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> str:
        """
        Assemble the statement from the clauses added so far.

        The clauses are kept, so the builder can be extended and rendered
        again. The result is also stored as the current query.

        Returns:
            Statement text ending with ';'
        """
        with self._lock:
            self._query = render_statement(self._store)
            query = self._query
        logger.debug(f"Rendered statement: {query}")
        return query

    def current_query(self) -> str:
        """Return the last rendered statement, or '' if never rendered."""
        with self._lock:
            return self._query

    # Names used by earlier releases
    create_query = render
    get_query = current_query

    @property
    def clauses(self) -> Dict[ClauseKind, Tuple[str, ...]]:
        """Snapshot of the fragments accumulated for every clause kind."""
        with self._lock:
            return self._store.snapshot()

    @staticmethod
    def build_insert(table: str, columns: Sequence[str], values: Sequence[str]) -> str:
        """Build a standalone INSERT statement. See sqlbuilder.dml.build_insert."""
        return build_insert(table, columns, values)

    get_insert_statement = build_insert

    def __str__(self) -> str:
        with self._lock:
            return render_statement(self._store)

    def __repr__(self) -> str:
        with self._lock:
            return f"SqlBuilder({self._store!r})"
