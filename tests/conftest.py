"""Shared fixtures"""

import itertools

import pytest

from todoedit.core.session import SessionState
from todoedit.core.store import ItemStore


@pytest.fixture
def ids():
    """Deterministic id source: item-1, item-2, ..."""
    counter = itertools.count(1)
    return lambda: f"item-{next(counter)}"


@pytest.fixture
def store(ids):
    return ItemStore(id_factory=ids)


@pytest.fixture
def session(store):
    return SessionState(store=store)


@pytest.fixture
def session3(session):
    """Session with three items and nothing selected"""
    for _ in range(3):
        session.append_item()
    return session
