"""Static asset middleware built on Starlette's ``StaticFiles``.

Runs in front of the router: existing files under the Static Asset Root
win over every route, anything ``StaticFiles`` can't find falls through
to the wrapped app.
"""

import logging
import mimetypes
import os
from pathlib import Path

from starlette.exceptions import HTTPException
from starlette.responses import FileResponse, PlainTextResponse, RedirectResponse, Response
from starlette.staticfiles import StaticFiles
from starlette.types import ASGIApp, Receive, Scope, Send

logger = logging.getLogger(__name__)

# Fixed table so content types don't depend on the host's MIME database.
MEDIA_TYPES = {
    ".html": "text/html",
    ".htm": "text/html",
    ".js": "text/javascript",
    ".mjs": "text/javascript",
    ".css": "text/css",
    ".json": "application/json",
    ".map": "application/json",
    ".txt": "text/plain",
    ".svg": "image/svg+xml",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".ico": "image/x-icon",
    ".woff": "font/woff",
    ".woff2": "font/woff2",
    ".wasm": "application/wasm",
}

DEFAULT_MEDIA_TYPE = "application/octet-stream"


def guess_media_type(path: str | os.PathLike) -> str:
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix in MEDIA_TYPES:
        return MEDIA_TYPES[suffix]
    media_type, _ = mimetypes.guess_type(path.name)
    return media_type or DEFAULT_MEDIA_TYPE


def is_escape_attempt(segments: list[str]) -> bool:
    """``..`` segments, backslashes and NUL bytes never name an asset."""
    return any(s == ".." or "\\" in s or "\x00" in s for s in segments)


def redirect_location(segments: list[str], query_string: bytes) -> str:
    """Same-origin path for the directory's trailing-slash URL.

    Empty segments are dropped so ``//docs`` can't become a
    protocol-relative ``//docs/``.
    """
    location = "/" + "/".join(segments) + "/"
    if query_string:
        location += "?" + query_string.decode("latin-1")
    return location


class StaticAssets(StaticFiles):
    """Serve GET/HEAD requests for files under ``directory``.

    Directories with an ``index.html`` are served at their trailing-slash
    URL and redirected (301) to it otherwise.  Dotfiles, other methods
    and anything not found are passed to ``app``.
    """

    def __init__(self, app: ASGIApp, directory: str | os.PathLike) -> None:
        # The root may not exist yet; a missing root just means nothing is static.
        super().__init__(directory=directory, html=True, check_dir=False)
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope["method"] not in ("GET", "HEAD"):
            await self.app(scope, receive, send)
            return

        segments = [s for s in scope["path"].split("/") if s]
        if is_escape_attempt(segments):
            logger.warning(f"Rejected path outside static root: {scope['path']!r}")
            response = PlainTextResponse("Forbidden", status_code=403)
            await response(scope, receive, send)
            return

        if any(s.startswith(".") for s in segments):
            await self.app(scope, receive, send)
            return

        try:
            response = await self.get_response(self.get_path(scope), scope)
        except HTTPException as exc:
            # Raised outside the router, so FastAPI's handlers won't see it.
            if exc.status_code == 404:
                response = None
            else:
                response = PlainTextResponse(exc.detail, status_code=exc.status_code)

        # html=True serves a 404.html when present; the SPA fallback owns 404s.
        if response is None or response.status_code == 404:
            await self.app(scope, receive, send)
            return

        if isinstance(response, RedirectResponse):
            response = RedirectResponse(
                redirect_location(segments, scope.get("query_string", b"")),
                status_code=301,
            )
        await response(scope, receive, send)

    def file_response(self, full_path, stat_result, scope, status_code=200) -> Response:
        response = super().file_response(full_path, stat_result, scope, status_code)
        if isinstance(response, FileResponse):
            media_type = guess_media_type(full_path)
            if media_type.startswith("text/"):
                media_type += "; charset=utf-8"
            response.headers["content-type"] = media_type
        return response
