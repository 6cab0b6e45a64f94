"""Smoke tests — verifies the app starts and the health endpoint responds."""

import pytest
from httpx import AsyncClient, ASGITransport

from asset_server.config import Settings
from asset_server.main import create_app


@pytest.mark.asyncio
async def test_health(client):
    r = await client.get("/health")
    assert r.status_code == 200
    assert r.text == "Server is running"
    assert r.headers["content-type"].startswith("text/plain")


@pytest.mark.asyncio
async def test_health_ignores_query_string(client):
    r = await client.get("/health", params={"probe": "k8s"})
    assert r.status_code == 200
    assert r.text == "Server is running"


@pytest.mark.asyncio
async def test_health_head(client):
    r = await client.head("/health")
    assert r.status_code == 200


@pytest.mark.asyncio
@pytest.mark.parametrize("method", ["POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "PROPFIND"])
async def test_health_rejects_other_methods(client, index_html, method):
    r = await client.request(method, "/health")
    assert r.status_code == 405
    assert r.headers["allow"] == "GET, HEAD"
    assert r.content != index_html


@pytest.mark.asyncio
async def test_health_without_static_root(tmp_path):
    """Health does not depend on the built assets being present."""
    app = create_app(Settings(STATIC_DIR=str(tmp_path / "missing")))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        r = await c.get("/health")
    assert r.status_code == 200
    assert r.text == "Server is running"
