"""
=================================
Statement rendering from clauses.
=================================

Turns the contents of a ClauseStore into statement text. Sections are
emitted in a fixed order and empty clause kinds are skipped entirely:

    1. SELECT   (comma-separated)
    2. FROM     (comma-separated), then INNER, LEFT and RIGHT JOIN segments
    3. WHERE    (space-separated, connectives already on the fragments)
    4. GROUP BY (comma-separated)
    5. SORT BY  (comma-separated)
    6. HAVING   (space-separated)

Segments are joined with a single space and terminated with ';'.

Note:
    SORT BY and the placement of HAVING after it do not follow standard SQL
    (ORDER BY, and GROUP BY -> HAVING -> ORDER BY). Consumers of the rendered
    text rely on this exact layout, so it is kept as is.
"""

from typing import List

from sqlbuilder.clauses import JOIN_KINDS, ClauseKind, ClauseStore

STATEMENT_TERMINATOR = ';'
SORT_KEYWORD = 'SORT BY'


def _add_select(store: ClauseStore, segments: List[str]) -> None:
    if not store.is_empty(ClauseKind.SELECT):
        segments.append('SELECT ' + ', '.join(store.fragments(ClauseKind.SELECT)))


def _add_from(store: ClauseStore, segments: List[str]) -> None:
    """Add FROM and, only when a FROM exists, the join segments."""
    if store.is_empty(ClauseKind.FROM):
        return

    segments.append('FROM ' + ', '.join(store.fragments(ClauseKind.FROM)))
    for kind in JOIN_KINDS:
        if not store.is_empty(kind):
            segments.append(' '.join(store.fragments(kind)))


def _add_where(store: ClauseStore, segments: List[str]) -> None:
    if not store.is_empty(ClauseKind.WHERE):
        segments.append('WHERE ' + ' '.join(store.fragments(ClauseKind.WHERE)))


def _add_group_by(store: ClauseStore, segments: List[str]) -> None:
    if not store.is_empty(ClauseKind.GROUP_BY):
        segments.append('GROUP BY ' + ', '.join(store.fragments(ClauseKind.GROUP_BY)))


def _add_sort_by(store: ClauseStore, segments: List[str]) -> None:
    if not store.is_empty(ClauseKind.SORT_BY):
        segments.append(f"{SORT_KEYWORD} " + ', '.join(store.fragments(ClauseKind.SORT_BY)))


def _add_having(store: ClauseStore, segments: List[str]) -> None:
    if not store.is_empty(ClauseKind.HAVING):
        segments.append('HAVING ' + ' '.join(store.fragments(ClauseKind.HAVING)))


SECTION_BUILDERS = (
    _add_select,
    _add_from,
    _add_where,
    _add_group_by,
    _add_sort_by,
    _add_having,
)


def render_segments(store: ClauseStore) -> List[str]:
    """
    Build the ordered list of statement segments.

    Args:
        store: Clause store to read

    Returns:
        Non-empty segments in rendering order
    """
    segments: List[str] = []
    for add_section in SECTION_BUILDERS:
        add_section(store, segments)
    return segments


def render_statement(store: ClauseStore) -> str:
    """
    Render a clause store into a terminated statement.

    Pure function of the store's current contents; the store is not
    modified.

    Args:
        store: Clause store to render

    Returns:
        Statement text ending with ';'

    Example:
        >>> store = ClauseStore()
        >>> store.replace(ClauseKind.SELECT, ['*'])
        >>> store.append(ClauseKind.FROM, '`users`')
        >>> render_statement(store)
        'SELECT * FROM `users`;'
    """
    return ' '.join(render_segments(store)) + STATEMENT_TERMINATOR
