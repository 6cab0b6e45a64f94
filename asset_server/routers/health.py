"""Liveness endpoint."""

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Health"])

HEALTH_PATH = "/health"
HEALTH_MESSAGE = "Server is running"

ALLOWED_METHODS = ("GET", "HEAD")


async def health_check(request: Request):
    """Plaintext liveness probe."""
    if request.method not in ALLOWED_METHODS:
        raise HTTPException(
            status_code=405,
            detail="Method Not Allowed",
            headers={"Allow": ", ".join(ALLOWED_METHODS)},
        )
    return PlainTextResponse(HEALTH_MESSAGE)


# Plain route with no method filter: every method reaches the handler,
# so the SPA catch-all never answers /health.
router.add_route(HEALTH_PATH, health_check, methods=None, include_in_schema=False)
