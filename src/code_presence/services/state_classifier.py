"""Idle / editing / debugging classification of the editor state."""

from __future__ import annotations

from code_presence.domain.entities import (
    ActivityKind,
    DebugSnapshot,
    EditorSnapshot,
    SlotTemplates,
)
from code_presence.services.template_engine import TemplateContext, render


def classify(editor: EditorSnapshot, debug: DebugSnapshot) -> ActivityKind:
    """No document means idle, even while a debug session runs."""
    if editor.document is None:
        return ActivityKind.IDLE
    if debug.active:
        return ActivityKind.DEBUGGING
    return ActivityKind.EDITING


def select_template(kind: ActivityKind, templates: SlotTemplates) -> str:
    if kind is ActivityKind.IDLE:
        return templates.idling
    if kind is ActivityKind.DEBUGGING:
        return templates.debugging
    return templates.editing


async def describe(
    kind: ActivityKind, templates: SlotTemplates, context: TemplateContext
) -> str:
    """Render the slot template matching *kind*."""
    return await render(select_template(kind, templates), context)
