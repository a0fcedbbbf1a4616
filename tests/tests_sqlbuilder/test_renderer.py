"""
Test suite for sqlbuilder.renderer.

Tests cover:
- render_segments: segment order and omission of empty clause kinds
- render_statement: joining and termination
"""

import pytest

from sqlbuilder.clauses import ClauseKind
from sqlbuilder.renderer import render_segments, render_statement


@pytest.mark.unit
def test_empty_store_renders_terminator(store):
    """Test no segments are produced for an empty store."""
    assert render_segments(store) == []
    assert render_statement(store) == ";"


@pytest.mark.unit
def test_select_list_is_comma_joined(store):
    """Test SELECT fragments are joined with ', '."""
    store.append(ClauseKind.SELECT, "`t`.`a`")
    store.append(ClauseKind.SELECT, "COUNT(*)")

    assert render_segments(store) == ["SELECT `t`.`a`, COUNT(*)"]


@pytest.mark.unit
def test_joins_follow_from_as_separate_segments(store):
    """Test each join kind becomes its own segment after FROM."""
    store.append(ClauseKind.FROM, "`a`")
    store.append(ClauseKind.RIGHT_JOIN, "RIGHT JOIN `d` ON 1 = 1")
    store.append(ClauseKind.INNER_JOIN, "INNER JOIN `b` ON 1 = 1")
    store.append(ClauseKind.INNER_JOIN, "INNER JOIN `c` ON 1 = 1")

    assert render_segments(store) == [
        "FROM `a`",
        "INNER JOIN `b` ON 1 = 1 INNER JOIN `c` ON 1 = 1",
        "RIGHT JOIN `d` ON 1 = 1",
    ]


@pytest.mark.edge_case
def test_joins_are_not_rendered_without_from(store):
    """Test join fragments are only emitted alongside a FROM segment."""
    store.append(ClauseKind.LEFT_JOIN, "LEFT JOIN `b` ON 1 = 1")

    assert render_statement(store) == ";"


@pytest.mark.regression
def test_sort_by_precedes_having(store):
    """Test SORT BY keyword and its placement before HAVING."""
    store.append(ClauseKind.HAVING, "COUNT(*) > 1")
    store.append(ClauseKind.SORT_BY, "`a`")
    store.append(ClauseKind.GROUP_BY, "`a`")

    assert render_statement(store) == "GROUP BY `a` SORT BY `a` HAVING COUNT(*) > 1;"


@pytest.mark.unit
def test_condition_fragments_are_space_joined(store):
    """Test WHERE and HAVING fragments are joined with single spaces."""
    store.append(ClauseKind.WHERE, "a = 1")
    store.append(ClauseKind.WHERE, "OR b = 2")
    store.append(ClauseKind.HAVING, "x > 1")
    store.append(ClauseKind.HAVING, "AND y > 2")

    assert render_statement(store) == "WHERE a = 1 OR b = 2 HAVING x > 1 AND y > 2;"


@pytest.mark.unit
def test_render_does_not_modify_store(store):
    """Test rendering leaves the store contents untouched."""
    store.append(ClauseKind.FROM, "`a`")
    before = store.snapshot()

    render_statement(store)
    render_statement(store)

    assert store.snapshot() == before
