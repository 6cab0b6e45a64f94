"""Request helpers shared by the routers."""

from fastapi import Request

from asset_server.config import Settings


def get_settings(request: Request) -> Settings:
    """Settings the app was built with."""
    return request.app.state.settings
