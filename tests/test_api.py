"""
Tests for the HTTP surface: health check and GraphQL over FastAPI
"""

from collections.abc import Generator

import pytest
from bson import ObjectId
from httpx import ASGITransport, AsyncClient

from postboard.api.app import create_app
from postboard.config import settings
from postboard.database.connection import get_database, init_database, reset_database
from postboard.graphql.schema import create_graphql_router


@pytest.fixture
def wired_database(mongo_client) -> Generator[None, None, None]:
    """Point the shared connection at the in-memory client."""
    init_database(client=mongo_client, database_name="postboard_http", force_reinit=True)
    yield
    reset_database()


@pytest.fixture
def app(wired_database):
    return create_app()


@pytest.mark.asyncio
async def test_health(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


@pytest.mark.integration
@pytest.mark.asyncio
async def test_create_user_over_http_hashes_password(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post(
            "/graphql",
            json={
                "operationName": "Register",
                "query": """
                mutation Register($input: CreateUserInput!) {
                  createUser(input: $input) { id email }
                }
                """,
                "variables": {
                    "input": {"name": "Ada", "password": "hunter2", "email": "ada@example.com"}
                },
            },
        )

    assert response.status_code == 200
    body = response.json()
    assert "errors" not in body
    user_id = body["data"]["createUser"]["id"]

    doc = await get_database()["users"].find_one({"_id": ObjectId(user_id)})
    assert doc["email"] == "ada@example.com"
    assert doc["password"].startswith("scrypt$")


@pytest.mark.integration
@pytest.mark.asyncio
async def test_not_found_is_reported_in_errors(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post(
            "/graphql",
            json={
                "query": "mutation D($id: ID!) { deleteComment(id: $id) }",
                "variables": {"id": str(ObjectId())},
            },
        )

    assert response.status_code == 200
    body = response.json()
    assert body["errors"][0]["message"] == "Comment not found"
    assert body["errors"][0]["extensions"] == {"code": "NOT_FOUND"}


@pytest.mark.parametrize("enabled,expected", [(True, "graphiql"), (False, None)])
def test_graphiql_setting_selects_ide(monkeypatch, enabled, expected):
    monkeypatch.setattr(settings, "graphiql", enabled)

    assert create_graphql_router().graphql_ide == expected


@pytest.mark.asyncio
async def test_graphiql_page_is_served(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/graphql", headers={"Accept": "text/html"})

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]


@pytest.mark.asyncio
async def test_request_id_is_echoed(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        generated = await client.get("/health")
        forwarded = await client.get("/health", headers={"X-Request-ID": "upstream-1"})

    assert generated.headers["x-request-id"]
    assert forwarded.headers["x-request-id"] == "upstream-1"
