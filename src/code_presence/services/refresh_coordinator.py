"""Refresh coordination: capture, build and deliver presence payloads.

Refreshes are triggered from outside (timer ticks, editor events) and may
overlap while one of them awaits a snapshot or a file stat.  Delivery is
last-write-wins by *trigger* order: once a refresh has been delivered, any
refresh triggered before it is dropped when it finally completes.

This is the entry point for long-lived host integrations (an editor
extension bridge, a desktop daemon) that implement the :class:`HostGateway`
and :class:`PresenceSink` ports; the HTTP interface is stateless and calls
:class:`BuildPresenceUseCase` directly instead.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable

from code_presence.domain.entities import (
    PresenceConfig,
    PresencePayload,
    SourceControlSnapshot,
)
from code_presence.domain.ports.host_gateway import HostGateway
from code_presence.domain.ports.presence_sink import PresenceSink
from code_presence.services.build_presence import BuildPresenceUseCase

logger = logging.getLogger(__name__)


class RefreshCoordinator:
    """Owns the only cross-refresh state: the start-timestamp anchor."""

    def __init__(
        self,
        host: HostGateway,
        use_case: BuildPresenceUseCase,
        sink: PresenceSink,
        config_provider: Callable[[], PresenceConfig],
    ) -> None:
        self._host = host
        self._use_case = use_case
        self._sink = sink
        self._config_provider = config_provider
        self._triggered = 0
        self._delivered = 0
        self._start_timestamp: int | None = None
        self._publish_lock = asyncio.Lock()

    @property
    def start_timestamp(self) -> int | None:
        """Anchor carried into the next refresh."""
        return self._start_timestamp

    def reset(self) -> None:
        """Forget the anchor so the next payload starts a new session."""
        self._start_timestamp = None

    async def refresh(self) -> PresencePayload | None:
        """Run one refresh; return the delivered payload, or ``None`` if stale."""
        self._triggered += 1
        generation = self._triggered
        config = self._config_provider()

        editor, debug, source_control = await asyncio.gather(
            self._host.editor_snapshot(),
            self._host.debug_snapshot(),
            self._source_control(),
        )
        payload = await self._use_case.execute(
            config,
            editor,
            debug,
            source_control,
            previous_start=self._start_timestamp,
        )

        async with self._publish_lock:
            if generation < self._delivered:
                logger.debug(
                    "Dropping stale refresh #%d (refresh #%d already delivered)",
                    generation,
                    self._delivered,
                )
                return None
            self._delivered = generation
            self._start_timestamp = payload.start_timestamp
            await self._sink.publish(payload)

        logger.info("Published presence #%d: %s", generation, payload.details)
        return payload

    async def _source_control(self) -> SourceControlSnapshot:
        try:
            return await self._host.source_control_snapshot()
        except Exception:
            logger.debug("Source-control state unavailable, using an empty snapshot")
            return SourceControlSnapshot()
