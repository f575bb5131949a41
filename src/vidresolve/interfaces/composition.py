"""Composition root: dependency injection via FastAPI lifespan."""

from __future__ import annotations

from contextlib import asynccontextmanager
from http.cookiejar import CookieJar, DefaultCookiePolicy
from typing import AsyncIterator, cast

import httpx
import structlog
from fastapi import FastAPI

from vidresolve.application.use_cases import ListVideosUseCase, ResolveVideoUrlUseCase
from vidresolve.infrastructure.config import AppConfig
from vidresolve.infrastructure.site import HttpxCatalogSource, SessionResolver
from vidresolve.interfaces.app_state import AppState

log = structlog.get_logger(__name__)


def create_http_client(config: AppConfig) -> httpx.AsyncClient:
    """Shared client for connection pooling only.

    The cookie jar accepts no domain, so Set-Cookie from one resolve is
    never replayed into another; the resolver sends ``Cookie`` itself.
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(config.http_timeout_seconds),
        headers={"User-Agent": config.http_user_agent},
        cookies=CookieJar(policy=DefaultCookiePolicy(allowed_domains=[])),
    )


def wire_use_cases(state: AppState, config: AppConfig) -> None:
    """Build the site adapters and use cases on top of ``state.http_client``."""
    source = HttpxCatalogSource(
        state.http_client,
        base_url=config.site_base_url,
        catalog_path=config.site_catalog_path,
        user_agent=config.http_user_agent,
        timeout=config.http_timeout_seconds,
    )
    resolver = SessionResolver(
        state.http_client,
        base_url=config.site_base_url,
        user_agent=config.http_user_agent,
        timeout=config.http_timeout_seconds,
    )
    state.list_videos_uc = ListVideosUseCase(source=source)
    state.resolve_video_url_uc = ResolveVideoUrlUseCase(resolver=resolver)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifespan Hook: Initialize and cleanup all resources (DI Composition Root).

    Order matters:
        1. HTTP Client (required by catalog source and resolver)
        2. Use cases
    """
    state = cast(AppState, app.state)
    config = state.config

    state.http_client = create_http_client(config)
    log.info(
        "http_client_initialized",
        timeout_seconds=config.http_timeout_seconds,
        base_url=config.site_base_url,
    )

    wire_use_cases(state, config)
    log.info("app_started", app_name=config.app_name, environment=config.environment)

    try:
        yield
    finally:
        await state.http_client.aclose()
        log.info("app_stopped")
