"""Port: presence sink, the transport that delivers payloads downstream."""

from __future__ import annotations

from typing import Protocol

from code_presence.domain.entities import PresencePayload


class PresenceSink(Protocol):
    async def publish(self, payload: PresencePayload) -> None:
        """Hand *payload* to the presence service connection."""
        ...
