"""Build-presence use case: turns host snapshots into a presence payload.

This is the single entry point for the synthesis logic.  It depends only on
the :class:`FileIconResolver` and :class:`FileSizeProbe` ports plus the pure
service modules; host state arrives as read-only snapshot arguments so the
whole pipeline runs without an editor attached.
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from code_presence.domain.entities import (
    DebugSnapshot,
    EditorSnapshot,
    PresenceButton,
    PresenceConfig,
    PresencePayload,
    SourceControlSnapshot,
)
from code_presence.domain.ports.file_icon_resolver import FileIconResolver
from code_presence.domain.ports.file_size_probe import FileSizeProbe
from code_presence.services.source_control import resolve_source_control
from code_presence.services.state_classifier import classify, describe
from code_presence.services.template_engine import TemplateContext, render

logger = logging.getLogger(__name__)

# ── Asset keys ──────────────────────────────────────────────────────────────

IDLE_IMAGE_KEY = "idle"
DEBUG_IMAGE_KEY = "debug"
VSCODE_IMAGE_KEY = "vscode"
VSCODE_INSIDERS_IMAGE_KEY = "vscode-insiders"
CURSOR_IMAGE_KEY = "cursor"

REPOSITORY_BUTTON_LABEL = "View Repository"
ACTIVITY_TYPE_PLAYING = 0
LARGE_IMAGE_MIN_WIDTH = 2


def default_small_image_key(editor: EditorSnapshot, debug: DebugSnapshot) -> str:
    """Debugging wins over the host variant, which wins over the default."""
    if debug.active:
        return DEBUG_IMAGE_KEY
    if "Cursor" in editor.app_name:
        return CURSOR_IMAGE_KEY
    if "Insiders" in editor.app_name:
        return VSCODE_INSIDERS_IMAGE_KEY
    return VSCODE_IMAGE_KEY


class BuildPresenceUseCase:
    """Assembles one :class:`PresencePayload` per refresh.

    Parameters
    ----------
    icon_resolver:
        Maps the active document to its file-type icon key.
    file_size_probe:
        Optional on-disk size lookup behind the ``{file_size}`` token.
    file_size_timeout:
        Seconds to wait for the probe before using the in-memory length.
    clock:
        Returns the current time in epoch seconds; injectable for tests.
    """

    def __init__(
        self,
        icon_resolver: FileIconResolver,
        file_size_probe: FileSizeProbe | None = None,
        *,
        file_size_timeout: float = 2.0,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._icons = icon_resolver
        self._probe = file_size_probe
        self._timeout = file_size_timeout
        self._clock = clock

    # ── Public entry point ──────────────────────────────────────────────

    async def execute(
        self,
        config: PresenceConfig,
        editor: EditorSnapshot,
        debug: DebugSnapshot,
        source_control: SourceControlSnapshot,
        previous_start: int | None = None,
    ) -> PresencePayload:
        """Build the payload; *previous_start* anchors the elapsed-time display."""
        document = editor.document
        kind = classify(editor, debug)
        icon_key = self._icons.resolve(document) if document is not None else None
        context = TemplateContext(
            editor,
            source_control,
            language=icon_key,
            file_size_probe=self._probe,
            file_size_timeout=self._timeout,
        )

        # 1. Default image pairs
        large = (IDLE_IMAGE_KEY, await render(config.large_image_idling, context))
        small = (
            default_small_image_key(editor, debug),
            await render(config.small_image, context),
        )

        # 2. Text slots, each suppressed independently
        details = None if config.hide_details else await describe(kind, config.details, context)
        state = None if config.hide_state else await describe(kind, config.state, context)

        # 3. Elapsed-time anchor
        start_timestamp = None if config.hide_timestamp else self._start_timestamp(previous_start)

        # 4. Swap pairs as a unit, then put the file icon in the active slot
        if config.swap_images:
            large, small = small, large

        if document is not None and icon_key is not None:
            icon = (
                icon_key,
                await render(config.large_image, context, min_width=LARGE_IMAGE_MIN_WIDTH),
            )
            if config.swap_images:
                small = icon
            else:
                large = icon
            logger.debug("Editor language id: %s", document.language_id)

        return PresencePayload(
            type=ACTIVITY_TYPE_PLAYING,
            details=details,
            state=state,
            start_timestamp=start_timestamp,
            large_image_key=large[0],
            large_image_text=large[1],
            small_image_key=small[0],
            small_image_text=small[1],
            buttons=self._buttons(config, source_control),
        )

    # ── Helpers ─────────────────────────────────────────────────────────

    def _start_timestamp(self, previous_start: int | None) -> int:
        if previous_start is not None:
            return previous_start
        return int(self._clock() * 1000)

    @staticmethod
    def _buttons(
        config: PresenceConfig, source_control: SourceControlSnapshot
    ) -> tuple[PresenceButton, ...]:
        if config.hide_repository_button:
            return ()
        url = resolve_source_control(source_control).repository_url
        if not url:
            return ()
        return (PresenceButton(label=REPOSITORY_BUTTON_LABEL, url=url),)
