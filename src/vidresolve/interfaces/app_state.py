"""Application state container for FastAPI dependency injection."""

from __future__ import annotations

import httpx
from starlette.datastructures import State

from vidresolve.application.use_cases import ListVideosUseCase, ResolveVideoUrlUseCase
from vidresolve.infrastructure.config import AppConfig


class AppState(State):
    """FastAPI application state with all DI resources.

    Lifecycle managed by composition.py::lifespan().
    """

    # Configuration
    config: AppConfig

    # Infrastructure
    http_client: httpx.AsyncClient

    # Application Services
    list_videos_uc: ListVideosUseCase
    resolve_video_url_uc: ResolveVideoUrlUseCase
