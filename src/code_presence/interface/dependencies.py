"""FastAPI dependency injection wiring."""

from __future__ import annotations

from functools import lru_cache

from code_presence.infrastructure.config import get_settings
from code_presence.infrastructure.language_icon_resolver import LanguageIconResolver
from code_presence.infrastructure.local_file_size_probe import LocalFileSizeProbe
from code_presence.services.build_presence import BuildPresenceUseCase


@lru_cache(maxsize=1)
def get_use_case() -> BuildPresenceUseCase:
    """Build (or return cached) use-case with injected adapters."""
    settings = get_settings()
    return BuildPresenceUseCase(
        icon_resolver=LanguageIconResolver(),
        file_size_probe=LocalFileSizeProbe(),
        file_size_timeout=settings.file_size_timeout_seconds,
    )
