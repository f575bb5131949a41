"""FastAPI application factory (create_app)."""

from __future__ import annotations

import time
from collections.abc import Awaitable, Callable

import structlog
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import PlainTextResponse, Response

from vidresolve.infrastructure.config import AppConfig
from vidresolve.interfaces.api.middleware import CorsMiddleware
from vidresolve.interfaces.app_state import AppState
from vidresolve.interfaces.composition import lifespan

log = structlog.get_logger(__name__)


async def _not_found_handler(
    request: Request, exc: StarletteHTTPException
) -> Response:
    # Unknown paths and known paths with the wrong method look the same.
    if exc.status_code in (404, 405):
        return PlainTextResponse("Not found", status_code=404)
    return await http_exception_handler(request, exc)


def create_app(config: AppConfig) -> FastAPI:
    """Build the FastAPI app for *config*.

    Only routes, middleware and handlers are set up here; the HTTP client
    and use cases are created in ``lifespan()``.
    """
    app = FastAPI(
        title="vidresolve",
        description="Video catalog scraper and stream URL resolver",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state = AppState()
    app.state.config = config

    app.add_middleware(CorsMiddleware)
    app.add_exception_handler(StarletteHTTPException, _not_found_handler)

    from vidresolve.interfaces.api.videos.router import router as videos_router

    app.include_router(videos_router)

    @app.get("/api/healthz")
    async def healthz() -> dict[str, str]:
        """Liveness probe."""
        return {"status": "ok"}

    @app.middleware("http")
    async def log_requests(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ):
        start = time.perf_counter()
        try:
            response = await call_next(request)
            return response
        finally:
            duration_ms = (time.perf_counter() - start) * 1000.0
            status_code = getattr(locals().get("response", None), "status_code", 500)

            log.info(
                "http_request",
                method=request.method,
                path=request.url.path,
                status_code=status_code,
                duration_ms=round(duration_ms, 2),
                client_host=(request.client.host if request.client else None),
            )

    return app
