from .list_videos import ListVideosUseCase
from .resolve_video_url import ResolveVideoUrlUseCase

__all__ = ["ListVideosUseCase", "ResolveVideoUrlUseCase"]
