"""
Tests for the FastAPI GraphQL router
"""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from socialnet.config import settings
from socialnet.graphql.schema import create_graphql_router


def _app_with_router() -> FastAPI:
    app = FastAPI()
    app.include_router(create_graphql_router())
    return app


def test_router_mounts_graphql_path():
    router = create_graphql_router()

    assert "/graphql" in {route.path for route in router.routes}


@pytest.mark.asyncio
async def test_graphiql_served_when_enabled(monkeypatch, shared_database):
    monkeypatch.setattr(settings, "graphiql", True)

    transport = ASGITransport(app=_app_with_router())
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/graphql", headers={"Accept": "text/html"})

    assert response.status_code == 200
    assert "graphiql" in response.text.lower()


@pytest.mark.asyncio
async def test_graphiql_hidden_when_disabled(monkeypatch, shared_database):
    monkeypatch.setattr(settings, "graphiql", False)

    transport = ASGITransport(app=_app_with_router())
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/graphql", headers={"Accept": "text/html"})

    assert response.status_code == 404
