"""FastAPI middleware for permissive CORS."""

from __future__ import annotations

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

log = structlog.get_logger(__name__)

CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


class CorsMiddleware(BaseHTTPMiddleware):
    """Answers every OPTIONS request and stamps CORS headers on every response.

    Unlike Starlette's ``CORSMiddleware`` this does not depend on the
    request carrying ``Origin``: any OPTIONS request on any path gets an
    empty 200, and every other response gets the same three headers.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.method == "OPTIONS":
            log.debug("cors_preflight", path=request.url.path)
            return Response(status_code=200, headers=CORS_HEADERS)

        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response
