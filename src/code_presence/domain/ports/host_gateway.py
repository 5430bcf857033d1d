"""Port: host gateway, the editor the presence is being synthesized for."""

from __future__ import annotations

from typing import Protocol

from code_presence.domain.entities import (
    DebugSnapshot,
    EditorSnapshot,
    SourceControlSnapshot,
)


class HostGateway(Protocol):
    """Abstract contract for capturing host state at refresh time."""

    async def editor_snapshot(self) -> EditorSnapshot:
        ...

    async def debug_snapshot(self) -> DebugSnapshot:
        ...

    async def source_control_snapshot(self) -> SourceControlSnapshot:
        """Return the repositories known to the host's git integration."""
        ...
