"""
=========================================
Clause storage for the statement builder.
=========================================

Holds the fixed set of clause kinds a statement can carry and the ordered
fragments accumulated for each of them.

Classes:
    ClauseKind: Closed enumeration of the nine clause kinds
    ClauseStore: Ordered fragment sequences keyed by ClauseKind

Helpers:
    is_blank: Blankness test shared by every validating call
    quote_identifier: Wrap a table or column name in backticks
    table_column: Build a `table`.`column` reference

Identifiers are wrapped in backticks but otherwise taken verbatim. Nothing in
this module escapes or sanitizes its input.

Example:
    >>> from sqlbuilder.clauses import ClauseKind, ClauseStore, quote_identifier
    >>>
    >>> store = ClauseStore()
    >>> store.append(ClauseKind.FROM, quote_identifier('users'))
    >>> store.append_with_connective(ClauseKind.WHERE, 'id > 5', 'AND')
    >>> store.fragments(ClauseKind.WHERE)
    ('id > 5',)
"""

from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from sqlbuilder.exceptions import InvalidClauseError

IDENTIFIER_QUOTE = '`'


class ClauseKind(Enum):
    """Clause kinds tracked by a ClauseStore."""

    SELECT = 'select'
    FROM = 'from'
    INNER_JOIN = 'inner_join'
    LEFT_JOIN = 'left_join'
    RIGHT_JOIN = 'right_join'
    WHERE = 'where'
    GROUP_BY = 'group_by'
    HAVING = 'having'
    SORT_BY = 'sort_by'


JOIN_KINDS = (ClauseKind.INNER_JOIN, ClauseKind.LEFT_JOIN, ClauseKind.RIGHT_JOIN)


def is_blank(value: Optional[str]) -> bool:
    """Return True for None or a string with no visible characters."""
    return value is None or not str(value).strip()


def quote_identifier(name: str) -> str:
    """Wrap an identifier in the identifier quote character."""
    return f"{IDENTIFIER_QUOTE}{name}{IDENTIFIER_QUOTE}"


def table_column(table: str, column: str) -> str:
    """Build a quoted table-qualified column reference."""
    return f"{quote_identifier(table)}.{quote_identifier(column)}"


class ClauseStore:
    """Ordered fragment sequences for every clause kind.

    The store is created with one empty sequence per ClauseKind and never
    gains or loses a kind. Fragments keep their insertion order. Every
    mutation validates its fragment first, so a rejected call leaves the
    store exactly as it was.

    Example:
        >>> store = ClauseStore()
        >>> store.replace(ClauseKind.SELECT, ['*'])
        >>> store.is_empty(ClauseKind.SELECT)
        False
    """

    def __init__(self):
        self._clauses: Dict[ClauseKind, List[str]] = {kind: [] for kind in ClauseKind}

    def fragments(self, kind: ClauseKind) -> Tuple[str, ...]:
        """Return the fragments of a clause kind in insertion order."""
        return tuple(self._clauses[kind])

    def is_empty(self, kind: ClauseKind) -> bool:
        """Check whether a clause kind holds no fragments."""
        return not self._clauses[kind]

    def snapshot(self) -> Dict[ClauseKind, Tuple[str, ...]]:
        """Return an immutable copy of every clause kind's fragments."""
        return {kind: tuple(fragments) for kind, fragments in self._clauses.items()}

    def append(self, kind: ClauseKind, fragment: str) -> None:
        """
        Append a fragment to a clause kind.

        Args:
            kind: Clause kind to extend
            fragment: Already formatted fragment text

        Raises:
            InvalidClauseError: If the fragment is blank
        """
        self._require_fragment(kind, fragment)
        self._clauses[kind].append(fragment)

    def replace(self, kind: ClauseKind, fragments: Iterable[str]) -> None:
        """
        Discard a clause kind's fragments and store new ones.

        Args:
            kind: Clause kind to reset
            fragments: Replacement fragments

        Raises:
            InvalidClauseError: If any replacement fragment is blank
        """
        fragments = list(fragments)
        for fragment in fragments:
            self._require_fragment(kind, fragment)
        self._clauses[kind] = fragments

    def append_with_connective(self, kind: ClauseKind, fragment: str, connective: str) -> None:
        """
        Append a condition, prefixed with a connective unless it is the first.

        Args:
            kind: Clause kind to extend (WHERE or HAVING)
            fragment: Condition text, stored verbatim
            connective: Keyword placed before the condition (e.g. AND, OR)

        Raises:
            InvalidClauseError: If the fragment is blank, or the connective is
                blank while earlier fragments exist
        """
        self._require_fragment(kind, fragment)

        if self._clauses[kind]:
            if is_blank(connective):
                raise InvalidClauseError(
                    f"Cannot join {kind.value} conditions with an empty connective."
                )
            self._clauses[kind].append(f"{connective} {fragment}")
        else:
            self._clauses[kind].append(fragment)

    def truncate(self, kind: ClauseKind, length: int) -> None:
        """Drop fragments past the given length (used to roll back)."""
        del self._clauses[kind][length:]

    def __len__(self) -> int:
        return sum(len(fragments) for fragments in self._clauses.values())

    def __repr__(self) -> str:
        filled = ', '.join(
            f"{kind.value}={len(fragments)}"
            for kind, fragments in self._clauses.items() if fragments
        )
        return f"ClauseStore({filled})"

    @staticmethod
    def _require_fragment(kind: ClauseKind, fragment: str) -> None:
        if is_blank(fragment):
            raise InvalidClauseError(f"Cannot add an empty fragment to the {kind.value} clause.")
