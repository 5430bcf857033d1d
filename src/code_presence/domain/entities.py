"""Domain entities: pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ActivityKind(str, Enum):
    """What the user is doing right now; exactly one applies per refresh."""

    IDLE = "idle"
    EDITING = "editing"
    DEBUGGING = "debugging"


class ReplacementToken(str, Enum):
    """Literal placeholder markers recognised inside user templates."""

    TOTAL_LINES = "{total_lines}"
    CURRENT_LINE = "{current_line}"
    CURRENT_COLUMN = "{current_column}"
    FILE_SIZE = "{file_size}"
    GIT_BRANCH = "{git_branch}"
    GIT_REPO_NAME = "{git_repo_name}"
    LANGUAGE_LOWER = "{lang}"
    LANGUAGE_TITLE = "{Lang}"
    LANGUAGE_UPPER = "{LANG}"
    APP_NAME = "{app_name}"


# ── Host snapshots (read-only inputs) ───────────────────────────────────────


@dataclass(frozen=True, slots=True)
class CursorPosition:
    """Zero-based cursor location inside the active document."""

    line: int
    column: int


@dataclass(frozen=True, slots=True)
class DocumentSnapshot:
    """The document open in the active editor."""

    path: str
    language_id: str
    line_count: int
    text_length: int  # in-memory length, fallback for the on-disk size
    size_bytes: int | None = None


@dataclass(frozen=True, slots=True)
class EditorSnapshot:
    """Editor state at refresh time; no document means the user is idle."""

    app_name: str
    document: DocumentSnapshot | None = None
    cursor: CursorPosition | None = None


@dataclass(frozen=True, slots=True)
class DebugSnapshot:
    active: bool = False


@dataclass(frozen=True, slots=True)
class RemoteSnapshot:
    name: str
    fetch_url: str | None = None


@dataclass(frozen=True, slots=True)
class RepositorySnapshot:
    """One repository known to the host's source-control integration."""

    selected: bool = False
    branch: str | None = None
    remotes: tuple[RemoteSnapshot, ...] = ()


@dataclass(frozen=True, slots=True)
class SourceControlSnapshot:
    repositories: tuple[RepositorySnapshot, ...] = ()


# ── Configuration ───────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class SlotTemplates:
    """Template family for one text slot, keyed by activity."""

    idling: str
    editing: str
    debugging: str


@dataclass(frozen=True, slots=True)
class PresenceConfig:
    """User options read once per refresh."""

    details: SlotTemplates
    state: SlotTemplates
    large_image: str
    large_image_idling: str
    small_image: str
    swap_images: bool = False
    hide_details: bool = False
    hide_state: bool = False
    hide_repository_button: bool = False
    hide_timestamp: bool = False


# ── Output ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class PresenceButton:
    label: str
    url: str


@dataclass(frozen=True, slots=True)
class PresencePayload:
    """The status record handed to the presence transport."""

    large_image_key: str
    large_image_text: str
    small_image_key: str
    small_image_text: str
    type: int = 0
    details: str | None = None
    state: str | None = None
    start_timestamp: int | None = None  # epoch milliseconds
    buttons: tuple[PresenceButton, ...] = field(default_factory=tuple)

    def as_activity(self) -> dict[str, Any]:
        """Return the wire shape expected by presence clients.

        Optional fields that are absent are left out entirely rather than
        sent as ``null``.
        """
        activity: dict[str, Any] = {"type": self.type}
        if self.details is not None:
            activity["details"] = self.details
        if self.state is not None:
            activity["state"] = self.state
        if self.start_timestamp is not None:
            activity["startTimestamp"] = self.start_timestamp
        activity.update(
            largeImageKey=self.large_image_key,
            largeImageText=self.large_image_text,
            smallImageKey=self.small_image_key,
            smallImageText=self.small_image_text,
        )
        if self.buttons:
            activity["buttons"] = [
                {"label": button.label, "url": button.url} for button in self.buttons
            ]
        return activity
