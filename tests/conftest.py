from __future__ import annotations

from collections.abc import Iterator

import pytest

from code_presence.domain.entities import (
    CursorPosition,
    DocumentSnapshot,
    EditorSnapshot,
    PresenceConfig,
    RemoteSnapshot,
    RepositorySnapshot,
    SlotTemplates,
    SourceControlSnapshot,
)
from code_presence.infrastructure.config import get_settings
from code_presence.interface.dependencies import get_use_case


@pytest.fixture(autouse=True)
def _settings_cache() -> Iterator[None]:
    get_settings.cache_clear()
    get_use_case.cache_clear()
    yield
    get_settings.cache_clear()
    get_use_case.cache_clear()


@pytest.fixture
def config() -> PresenceConfig:
    return PresenceConfig(
        details=SlotTemplates(
            idling="Idle details",
            editing="Editing {Lang}",
            debugging="Debugging {Lang}",
        ),
        state=SlotTemplates(
            idling="Idle state",
            editing="Line {current_line} of {total_lines}",
            debugging="On {git_branch}",
        ),
        large_image="A {LANG} file",
        large_image_idling="Idling",
        small_image="{app_name}",
    )


@pytest.fixture
def document() -> DocumentSnapshot:
    return DocumentSnapshot(
        path="/work/app/main.py",
        language_id="python",
        line_count=1200,
        text_length=640,
    )


@pytest.fixture
def editing(document: DocumentSnapshot) -> EditorSnapshot:
    return EditorSnapshot(
        app_name="Visual Studio Code",
        document=document,
        cursor=CursorPosition(line=41, column=7),
    )


@pytest.fixture
def idle() -> EditorSnapshot:
    return EditorSnapshot(app_name="Visual Studio Code")


@pytest.fixture
def repository() -> SourceControlSnapshot:
    return SourceControlSnapshot(
        repositories=(
            RepositorySnapshot(
                selected=True,
                branch="main",
                remotes=(RemoteSnapshot(name="origin", fetch_url="git@github.com:owner/repo.git"),),
            ),
        )
    )


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
