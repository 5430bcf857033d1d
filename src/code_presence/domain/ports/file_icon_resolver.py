"""Port: file icon resolver, defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from code_presence.domain.entities import DocumentSnapshot


class FileIconResolver(Protocol):
    """Maps a document to the asset key of its file-type icon."""

    def resolve(self, document: DocumentSnapshot) -> str:
        """Return the icon key; the key doubles as the language display name."""
        ...
