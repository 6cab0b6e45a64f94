"""SPA fallback: every unmatched route gets the entry document."""

import logging

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import FileResponse

from asset_server.dependencies import get_settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["SPA"])


async def spa_fallback(request: Request):
    settings = get_settings(request)
    entry = settings.entry_path
    if not entry.is_file():
        logger.error(f"Entry document missing: {entry} (requested {request.url.path})")
        raise HTTPException(status_code=404, detail="Entry document not found")
    return FileResponse(entry, media_type="text/html")


# Any method, any path: the client-side router decides what to render.
router.add_route("/{full_path:path}", spa_fallback, methods=None, include_in_schema=False)
