"""Local filesystem adapter, implements the FileSizeProbe port."""

from __future__ import annotations

import asyncio
import os

from code_presence.domain.exceptions import FileSizeUnavailableError


class LocalFileSizeProbe:
    """Concrete FileSizeProbe that stats files on the local disk."""

    async def size_of(self, path: str) -> int:
        try:
            stat = await asyncio.to_thread(os.stat, path)
        except (OSError, ValueError) as exc:
            raise FileSizeUnavailableError(f"Cannot stat {path!r}: {exc}") from exc
        return stat.st_size
