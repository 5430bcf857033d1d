"""Port: file size probe, defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol


class FileSizeProbe(Protocol):
    """Abstract contract for looking up a document's size on disk."""

    async def size_of(self, path: str) -> int:
        """Return the size of *path* in bytes.

        Raises :class:`~code_presence.domain.exceptions.FileSizeUnavailableError`
        when the size cannot be determined.
        """
        ...
