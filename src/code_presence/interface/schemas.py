"""Pydantic request / response DTOs for the API boundary."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from code_presence.domain.entities import (
    CursorPosition,
    DebugSnapshot,
    DocumentSnapshot,
    EditorSnapshot,
    RemoteSnapshot,
    RepositorySnapshot,
    SourceControlSnapshot,
)
from code_presence.domain.exceptions import InvalidSnapshotError

# ── Request ─────────────────────────────────────────────────────────────────


class CursorSchema(BaseModel):
    line: int = Field(ge=0)
    column: int = Field(ge=0)


class DocumentSchema(BaseModel):
    path: str
    language_id: str = "plaintext"
    line_count: int = Field(ge=0)
    text_length: int = Field(default=0, ge=0)
    size_bytes: int | None = Field(default=None, ge=0)


class EditorSchema(BaseModel):
    app_name: str = "Visual Studio Code"
    document: DocumentSchema | None = None
    cursor: CursorSchema | None = None


class RemoteSchema(BaseModel):
    name: str = "origin"
    fetch_url: str | None = None


class RepositorySchema(BaseModel):
    selected: bool = False
    branch: str | None = None
    remotes: list[RemoteSchema] = Field(default_factory=list)


class SourceControlSchema(BaseModel):
    repositories: list[RepositorySchema] = Field(default_factory=list)


class ConfigOverrides(BaseModel):
    """Per-user options layered over the process-wide settings."""

    model_config = ConfigDict(extra="forbid")

    swap_images: bool | None = None
    hide_details: bool | None = None
    hide_state: bool | None = None
    hide_repository_button: bool | None = None
    hide_timestamp: bool | None = None
    details_idling: str | None = None
    details_editing: str | None = None
    details_debugging: str | None = None
    state_idling: str | None = None
    state_editing: str | None = None
    state_debugging: str | None = None
    large_image: str | None = None
    large_image_idling: str | None = None
    small_image: str | None = None


class PresenceRequest(BaseModel):
    """Request body for ``POST /presence``."""

    editor: EditorSchema
    debugging: bool = False
    source_control: SourceControlSchema = Field(default_factory=SourceControlSchema)
    previous_start_timestamp: int | None = Field(default=None, ge=0)
    config: ConfigOverrides | None = None

    def editor_snapshot(self) -> EditorSnapshot:
        editor = self.editor
        document = editor.document
        cursor = editor.cursor
        if cursor is not None and document is None:
            raise InvalidSnapshotError("editor.cursor was given without editor.document.")
        if cursor is not None and document is not None and cursor.line >= max(document.line_count, 1):
            raise InvalidSnapshotError(
                f"Cursor line {cursor.line} is past the end of the document "
                f"({document.line_count} lines)."
            )
        return EditorSnapshot(
            app_name=editor.app_name,
            document=DocumentSnapshot(**document.model_dump()) if document else None,
            cursor=CursorPosition(line=cursor.line, column=cursor.column) if cursor else None,
        )

    def debug_snapshot(self) -> DebugSnapshot:
        return DebugSnapshot(active=self.debugging)

    def source_control_snapshot(self) -> SourceControlSnapshot:
        return SourceControlSnapshot(
            repositories=tuple(
                RepositorySnapshot(
                    selected=repo.selected,
                    branch=repo.branch,
                    remotes=tuple(
                        RemoteSnapshot(name=remote.name, fetch_url=remote.fetch_url)
                        for remote in repo.remotes
                    ),
                )
                for repo in self.source_control.repositories
            )
        )


# ── Response ────────────────────────────────────────────────────────────────


class ButtonSchema(BaseModel):
    label: str
    url: str


class PresenceResponse(BaseModel):
    """Successful response from ``POST /presence``; camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    type: int
    details: str | None = None
    state: str | None = None
    start_timestamp: int | None = None
    large_image_key: str
    large_image_text: str
    small_image_key: str
    small_image_text: str
    buttons: list[ButtonSchema] | None = None


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    status: str = "error"
    message: str
