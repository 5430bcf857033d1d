from __future__ import annotations

import asyncio

from code_presence.domain.entities import (
    DebugSnapshot,
    DocumentSnapshot,
    EditorSnapshot,
    PresencePayload,
    SourceControlSnapshot,
)
from code_presence.domain.exceptions import FileSizeUnavailableError


class FixedIconResolver:
    def __init__(self, key: str = "python") -> None:
        self.key = key

    def resolve(self, document: DocumentSnapshot) -> str:
        return self.key


class CountingProbe:
    """FileSizeProbe double that records calls and returns a fixed size."""

    def __init__(self, size: int = 2048) -> None:
        self.size = size
        self.calls: list[str] = []

    async def size_of(self, path: str) -> int:
        self.calls.append(path)
        return self.size


class FailingProbe:
    def __init__(self) -> None:
        self.calls = 0

    async def size_of(self, path: str) -> int:
        self.calls += 1
        raise FileSizeUnavailableError(f"Cannot stat {path}")


class HangingProbe:
    async def size_of(self, path: str) -> int:
        await asyncio.Event().wait()
        return 0


class FakeHost:
    """HostGateway double; editor snapshots can be held back on events."""

    def __init__(
        self,
        editor: EditorSnapshot,
        debug: DebugSnapshot | None = None,
        source_control: SourceControlSnapshot | None = None,
    ) -> None:
        self.editor = editor
        self.debug = debug or DebugSnapshot()
        self.source_control = source_control or SourceControlSnapshot()
        self.source_control_error: Exception | None = None
        # (gate, editor) pairs handed out to successive calls, in order
        self.pending: list[tuple[asyncio.Event, EditorSnapshot]] = []

    async def editor_snapshot(self) -> EditorSnapshot:
        if not self.pending:
            return self.editor
        gate, editor = self.pending.pop(0)
        await gate.wait()
        return editor

    async def debug_snapshot(self) -> DebugSnapshot:
        return self.debug

    async def source_control_snapshot(self) -> SourceControlSnapshot:
        if self.source_control_error is not None:
            raise self.source_control_error
        return self.source_control


class RecordingSink:
    def __init__(self) -> None:
        self.published: list[PresencePayload] = []

    async def publish(self, payload: PresencePayload) -> None:
        self.published.append(payload)


class BrokenProbe:
    """FileSizeProbe double that fails with an error outside the domain hierarchy."""

    async def size_of(self, path: str) -> int:
        raise RuntimeError("filesystem watcher crashed")
