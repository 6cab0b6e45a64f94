"""Shared fixtures: a built SPA in a temp dir and a client over the app."""

import pytest
from httpx import AsyncClient, ASGITransport

from asset_server.config import Settings
from asset_server.main import create_app

INDEX_HTML = b"<html>OK</html>"
APP_JS = b"console.log('app');\n"


@pytest.fixture
def static_dir(tmp_path):
    root = tmp_path / "public"
    root.mkdir()
    (root / "index.html").write_bytes(INDEX_HTML)
    (root / "app.js").write_bytes(APP_JS)
    (root / "style.css").write_text("body { color: red; }")
    (root / "manifest.json").write_text('{"name": "spa"}')
    (root / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n")
    (root / "blob.unknownext").write_bytes(b"\x00\x01\x02\x03")
    (root / ".env").write_text("SECRET=1")

    assets = root / "assets"
    assets.mkdir()
    (assets / "main.css").write_text("h1 { font-size: 2em; }")

    docs = root / "docs"
    docs.mkdir()
    (docs / "index.html").write_text("<h1>Docs</h1>")
    return root


@pytest.fixture
def settings(static_dir):
    return Settings(STATIC_DIR=str(static_dir))


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def index_html():
    return INDEX_HTML


@pytest.fixture
def app_js():
    return APP_JS
