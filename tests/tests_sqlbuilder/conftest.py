"""
Shared fixtures for sqlbuilder tests.

Key fixtures:
- builder: a fresh, empty SqlBuilder
- users_builder: a builder with SELECT and FROM already set on `users`
- store: a fresh, empty ClauseStore
"""

import pytest


@pytest.fixture
def builder():
    """Provide an empty SqlBuilder."""
    from sqlbuilder.builder import SqlBuilder

    return SqlBuilder()


@pytest.fixture
def users_builder(builder):
    """Provide a builder selecting users.id from `users`."""
    return builder.select_column("users", "id").from_table("users")


@pytest.fixture
def store():
    """Provide an empty ClauseStore."""
    from sqlbuilder.clauses import ClauseStore

    return ClauseStore()
