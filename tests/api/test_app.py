"""
HTTP-level tests for the FastAPI application
"""

import pytest
from httpx import ASGITransport, AsyncClient

from socialnet.api import app as app_module
from socialnet.api.app import create_app


@pytest.fixture
def app(shared_database):
    _ = shared_database
    return create_app()


@pytest.mark.integration
@pytest.mark.asyncio
async def test_graphql_endpoint_roundtrip(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        created = await client.post(
            "/graphql",
            json={
                "query": (
                    "mutation CreateUser($input: CreateUserInput!) "
                    "{ createUser(input: $input) { id name } }"
                ),
                "variables": {
                    "input": {"name": "Ana", "email": "ana@x.com", "password": "secret"}
                },
            },
        )
        assert created.status_code == 200, created.text
        user = created.json()["data"]["createUser"]
        assert user["name"] == "Ana"
        assert created.headers["X-Request-ID"]

        fetched = await client.post(
            "/graphql",
            json={"query": "query { users { id email } }"},
        )
        assert fetched.json()["data"]["users"] == [{"id": user["id"], "email": "ana@x.com"}]


@pytest.mark.integration
@pytest.mark.asyncio
async def test_domain_error_in_response(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        payload = {
            "query": 'mutation { addLikeToPost(postId: "%s", userId: "%s") { id } }'
            % ("0" * 24, "1" * 24)
        }
        response = await client.post("/graphql", json=payload)

    body = response.json()
    assert body["errors"][0]["message"] == "La publicación no existe"
    assert body["errors"][0]["extensions"] == {"code": "DOMAIN_ERROR"}


@pytest.mark.asyncio
async def test_request_id_header_is_echoed(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post(
            "/graphql",
            json={"query": "query { posts { id } }"},
            headers={"X-Request-ID": "req-123"},
        )

    assert response.headers["X-Request-ID"] == "req-123"


@pytest.mark.asyncio
async def test_health_reports_database_status(app, monkeypatch):
    async def fake_check():
        return False, "Cannot reach MongoDB"

    monkeypatch.setattr(app_module, "check_database_connection", fake_check)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": "degraded",
        "version": "0.1.0",
        "database": {"connected": False, "error": "Cannot reach MongoDB"},
    }
