"""
Tests for the HTTP surface: health check, GraphQL endpoint, request ids
"""

import pytest
from fastapi.testclient import TestClient

from library_graph.api.app import create_app
from library_graph.config import settings
from library_graph.store.factory import build_store
from library_graph.store.memory import MemoryStore


@pytest.fixture
def client(memory_store):
    with TestClient(create_app(store=memory_store)) as test_client:
        yield test_client


def graphql(client, query, variables=None):
    response = client.post(settings.graphql_path, json={"query": query, "variables": variables})
    assert response.status_code == 200
    return response.json()


def test_health_check(client):
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["store"] == "memory"


def test_query_over_http(client):
    body = graphql(client, '{ author(name: "Terry Pratchett") { age books { title } } }')

    assert "errors" not in body
    assert body["data"]["author"]["age"] == 66
    assert len(body["data"]["author"]["books"]) == 3


def test_mutation_over_http(client):
    body = graphql(
        client,
        "mutation AddAuthor($name: String!, $age: Int!) { addAuthor(name: $name, age: $age) { id name } }",
        {"name": "Octavia E. Butler", "age": 58},
    )

    assert body["data"]["addAuthor"]["name"] == "Octavia E. Butler"
    author_id = body["data"]["addAuthor"]["id"]
    found = graphql(client, "query ($id: ID) { author(id: $id) { name } }", {"id": author_id})
    assert found["data"]["author"] == {"name": "Octavia E. Butler"}


def test_request_id_is_echoed(client):
    response = client.get("/health", headers={"X-Request-ID": "abc123"})
    assert response.headers["X-Request-ID"] == "abc123"


def test_request_id_is_generated(client):
    response = client.get("/health")
    assert response.headers["X-Request-ID"]


def test_fixture_store_built_from_settings(monkeypatch):
    monkeypatch.setattr(settings, "store_backend", "fixtures")

    with TestClient(create_app()) as test_client:
        assert test_client.get("/health").json()["store"] == "memory"
        body = graphql(test_client, 'mutation { addAuthor(name: "X", age: 1) { id } }')

    assert body["data"] is None
    assert "read-only" in body["errors"][0]["message"]


@pytest.mark.asyncio
async def test_unknown_backend_is_rejected():
    with pytest.raises(ValueError, match="Unknown store backend"):
        await build_store(settings.model_copy(update={"store_backend": "mongo"}))


def test_graphiql_page(client):
    response = client.get(settings.graphql_path, headers={"Accept": "text/html"})
    assert response.status_code == 200
    assert "graphiql" in response.text.lower()


def test_store_is_shared_across_requests():
    store = MemoryStore(read_only=False)
    with TestClient(create_app(store=store)) as test_client:
        graphql(test_client, 'mutation { addBook(title: "One", authorID: "a") { id } }')
        body = graphql(test_client, "{ books { title } }")

    assert body["data"]["books"] == [{"title": "One"}]


def test_graphql_path_is_configurable(monkeypatch, fixture_store):
    monkeypatch.setattr(settings, "graphql_path", "/api")

    with TestClient(create_app(store=fixture_store)) as test_client:
        response = test_client.post("/api", json={"query": "{ authors { name } }"})
        assert test_client.post("/graphql", json={"query": "{ authors { name } }"}).status_code == 404

    assert response.status_code == 200
    assert len(response.json()["data"]["authors"]) == 3
