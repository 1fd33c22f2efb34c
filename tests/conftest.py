"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from bookgraph.config import Settings
from bookgraph.core.catalog import build_resolver_set, get_resolver_set
from bookgraph.main import app


@pytest.fixture
def settings():
    """Default settings, independent of the environment."""
    return Settings(_env_file=None)


@pytest.fixture
def resolvers(settings):
    """A freshly seeded catalog."""
    return build_resolver_set(settings)


@pytest.fixture
def client(resolvers):
    """Create a test client for the FastAPI app, bound to an isolated catalog."""
    app.dependency_overrides[get_resolver_set] = lambda: resolvers
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def graphql(client):
    """Post a GraphQL operation and return the decoded response body."""

    def execute(query: str, variables: dict | None = None) -> dict:
        response = client.post("/graphql", json={"query": query, "variables": variables or {}})
        assert response.status_code == 200
        return response.json()

    return execute
