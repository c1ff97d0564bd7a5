"""Shared fixtures for the tree-matchers test suite."""

import pytest

from treematchers import MatchingConfig

from dummy_tree import DummyAdapter, array_declaration, declaration


@pytest.fixture
def adapter():
    return DummyAdapter()


@pytest.fixture
def config(adapter):
    """Default config, error messages carry a subtree dump."""
    return MatchingConfig(adapter=adapter)


@pytest.fixture
def quiet_config(adapter):
    """Config without subtree dumps, for exact message assertions."""
    return MatchingConfig.without_dumps(adapter)


@pytest.fixture
def decl():
    return declaration()


@pytest.fixture
def array_decl():
    return array_declaration()
