"""Shared fixtures for the Cypher builder tests."""

import pytest

from cypher_builder.query_builder import CypherBuilder
from tests.models import Person


@pytest.fixture
def builder():
    """Create an empty CypherBuilder."""
    return CypherBuilder()


@pytest.fixture
def fred():
    return Person(Name="Fred", Age=17)


@pytest.fixture
def george():
    return Person(Name="George", Age=17)
