"""FastAPI application factory: static assets, health check, SPA fallback."""

from fastapi import FastAPI

from asset_server.config import Settings, build_settings
from asset_server.routers import health, spa
from asset_server.static import StaticAssets


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the asset server.

    Requests are matched in order: files under the static root, then
    ``/health``, then the catch-all that returns the entry document.

    Usable as a uvicorn factory (``uvicorn asset_server.main:create_app
    --factory``); settings are then read from the environment.
    """
    if settings is None:
        settings = build_settings()

    app = FastAPI(
        title="SPA Asset Server",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings

    # Static files take priority over every route
    app.add_middleware(StaticAssets, directory=settings.static_root)

    # Order matters: the SPA router's catch-all must come last
    app.include_router(health.router)
    app.include_router(spa.router)

    return app
