import dataclasses
import logging

import pytest

from code_presence.domain.entities import (
    DebugSnapshot,
    DocumentSnapshot,
    EditorSnapshot,
    PresenceButton,
    PresenceConfig,
    SourceControlSnapshot,
)
from code_presence.infrastructure.local_file_size_probe import LocalFileSizeProbe
from code_presence.services.build_presence import (
    CURSOR_IMAGE_KEY,
    DEBUG_IMAGE_KEY,
    IDLE_IMAGE_KEY,
    VSCODE_IMAGE_KEY,
    VSCODE_INSIDERS_IMAGE_KEY,
    BuildPresenceUseCase,
    default_small_image_key,
)
from code_presence.services.template_engine import ZERO_WIDTH_SPACE
from tests.helpers import CountingProbe, FailingProbe, FixedIconResolver

NOW = 1_700_000_000.0
NOW_MS = 1_700_000_000_000


@pytest.fixture
def use_case() -> BuildPresenceUseCase:
    return BuildPresenceUseCase(FixedIconResolver("python"), clock=lambda: NOW)


@pytest.mark.anyio
async def test_idle_payload(
    use_case: BuildPresenceUseCase, config: PresenceConfig, idle: EditorSnapshot
) -> None:
    payload = await use_case.execute(config, idle, DebugSnapshot(), SourceControlSnapshot())

    assert payload.type == 0
    assert payload.details == "Idle details"
    assert payload.state == "Idle state"
    assert payload.start_timestamp == NOW_MS
    assert (payload.large_image_key, payload.large_image_text) == (IDLE_IMAGE_KEY, "Idling")
    assert (payload.small_image_key, payload.small_image_text) == (VSCODE_IMAGE_KEY, "Visual Studio Code")
    assert payload.buttons == ()


@pytest.mark.anyio
async def test_idle_while_debugging_is_still_idle_text(
    use_case: BuildPresenceUseCase, config: PresenceConfig, idle: EditorSnapshot
) -> None:
    payload = await use_case.execute(config, idle, DebugSnapshot(active=True), SourceControlSnapshot())

    assert payload.details == "Idle details"
    assert payload.small_image_key == DEBUG_IMAGE_KEY


@pytest.mark.anyio
async def test_editing_payload(
    use_case: BuildPresenceUseCase,
    config: PresenceConfig,
    editing: EditorSnapshot,
    repository: SourceControlSnapshot,
) -> None:
    payload = await use_case.execute(config, editing, DebugSnapshot(), repository)

    assert payload.details == "Editing Python"
    assert payload.state == "Line 42 of 1,200"
    assert (payload.large_image_key, payload.large_image_text) == ("python", "A PYTHON file")
    assert payload.small_image_key == VSCODE_IMAGE_KEY
    assert payload.buttons == (PresenceButton(label="View Repository", url="https://github.com/owner/repo"),)


@pytest.mark.anyio
async def test_debugging_payload(
    use_case: BuildPresenceUseCase,
    config: PresenceConfig,
    editing: EditorSnapshot,
    repository: SourceControlSnapshot,
) -> None:
    payload = await use_case.execute(config, editing, DebugSnapshot(active=True), repository)

    assert payload.details == "Debugging Python"
    assert payload.state == "On main"
    assert payload.small_image_key == DEBUG_IMAGE_KEY


@pytest.mark.parametrize(
    ("app_name", "debugging", "expected"),
    [
        ("Visual Studio Code", True, DEBUG_IMAGE_KEY),
        ("Cursor", True, DEBUG_IMAGE_KEY),
        ("Cursor", False, CURSOR_IMAGE_KEY),
        ("Visual Studio Code - Insiders", False, VSCODE_INSIDERS_IMAGE_KEY),
        ("VSCodium", False, VSCODE_IMAGE_KEY),
    ],
)
def test_small_image_priority(app_name: str, debugging: bool, expected: str) -> None:
    editor = EditorSnapshot(app_name=app_name)
    assert default_small_image_key(editor, DebugSnapshot(active=debugging)) == expected


@pytest.mark.anyio
async def test_hidden_slots_are_omitted(
    use_case: BuildPresenceUseCase, config: PresenceConfig, editing: EditorSnapshot
) -> None:
    config = dataclasses.replace(config, hide_details=True, hide_state=True)

    payload = await use_case.execute(config, editing, DebugSnapshot(), SourceControlSnapshot())

    assert payload.details is None
    assert payload.state is None
    assert "details" not in payload.as_activity()
    assert "state" not in payload.as_activity()


@pytest.mark.anyio
async def test_hide_repository_button(
    use_case: BuildPresenceUseCase,
    config: PresenceConfig,
    editing: EditorSnapshot,
    repository: SourceControlSnapshot,
) -> None:
    config = dataclasses.replace(config, hide_repository_button=True)

    payload = await use_case.execute(config, editing, DebugSnapshot(), repository)

    assert payload.buttons == ()
    assert "buttons" not in payload.as_activity()


@pytest.mark.anyio
async def test_swap_images_moves_key_and_text_together(
    use_case: BuildPresenceUseCase, config: PresenceConfig, idle: EditorSnapshot
) -> None:
    plain = await use_case.execute(config, idle, DebugSnapshot(), SourceControlSnapshot())
    swapped = await use_case.execute(
        dataclasses.replace(config, swap_images=True), idle, DebugSnapshot(), SourceControlSnapshot()
    )

    assert (swapped.large_image_key, swapped.large_image_text) == (
        plain.small_image_key,
        plain.small_image_text,
    )
    assert (swapped.small_image_key, swapped.small_image_text) == (
        plain.large_image_key,
        plain.large_image_text,
    )


@pytest.mark.anyio
async def test_swap_images_puts_file_icon_in_small_slot(
    use_case: BuildPresenceUseCase, config: PresenceConfig, editing: EditorSnapshot
) -> None:
    config = dataclasses.replace(config, swap_images=True)

    payload = await use_case.execute(config, editing, DebugSnapshot(), SourceControlSnapshot())

    assert (payload.small_image_key, payload.small_image_text) == ("python", "A PYTHON file")
    assert (payload.large_image_key, payload.large_image_text) == (VSCODE_IMAGE_KEY, "Visual Studio Code")


@pytest.mark.anyio
async def test_short_large_image_text_is_padded(
    config: PresenceConfig, editing: EditorSnapshot
) -> None:
    use_case = BuildPresenceUseCase(FixedIconResolver("c"), clock=lambda: NOW)
    config = dataclasses.replace(config, large_image="{lang}")

    payload = await use_case.execute(config, editing, DebugSnapshot(), SourceControlSnapshot())

    assert payload.large_image_text == "c" + ZERO_WIDTH_SPACE


@pytest.mark.anyio
async def test_start_timestamp_is_carried_forward(
    use_case: BuildPresenceUseCase, config: PresenceConfig, editing: EditorSnapshot
) -> None:
    first = await use_case.execute(config, editing, DebugSnapshot(), SourceControlSnapshot())
    later = BuildPresenceUseCase(FixedIconResolver(), clock=lambda: NOW + 60)
    second = await later.execute(
        config, editing, DebugSnapshot(), SourceControlSnapshot(), previous_start=first.start_timestamp
    )

    assert first.start_timestamp == NOW_MS
    assert second.start_timestamp == first.start_timestamp


@pytest.mark.anyio
async def test_hidden_timestamp_is_absent(
    use_case: BuildPresenceUseCase, config: PresenceConfig, editing: EditorSnapshot
) -> None:
    config = dataclasses.replace(config, hide_timestamp=True)

    payload = await use_case.execute(
        config, editing, DebugSnapshot(), SourceControlSnapshot(), previous_start=NOW_MS
    )

    assert payload.start_timestamp is None
    assert "startTimestamp" not in payload.as_activity()


@pytest.mark.anyio
async def test_file_size_fallback_in_payload(config: PresenceConfig, editing: EditorSnapshot) -> None:
    use_case = BuildPresenceUseCase(FixedIconResolver(), FailingProbe(), clock=lambda: NOW)
    config = dataclasses.replace(config, state=dataclasses.replace(config.state, editing="{file_size}"))

    payload = await use_case.execute(config, editing, DebugSnapshot(), SourceControlSnapshot())

    assert payload.state == "640 bytes"


@pytest.mark.anyio
async def test_file_size_not_queried_when_no_template_uses_it(
    config: PresenceConfig, editing: EditorSnapshot
) -> None:
    probe = CountingProbe()
    use_case = BuildPresenceUseCase(FixedIconResolver(), probe, clock=lambda: NOW)

    await use_case.execute(config, editing, DebugSnapshot(), SourceControlSnapshot())

    assert probe.calls == []


@pytest.mark.anyio
async def test_language_id_is_logged(
    use_case: BuildPresenceUseCase,
    config: PresenceConfig,
    editing: EditorSnapshot,
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.DEBUG, logger="code_presence.services.build_presence"):
        await use_case.execute(config, editing, DebugSnapshot(), SourceControlSnapshot())

    assert "Editor language id: python" in caplog.text


@pytest.mark.anyio
async def test_as_activity_wire_shape(
    use_case: BuildPresenceUseCase,
    config: PresenceConfig,
    editing: EditorSnapshot,
    repository: SourceControlSnapshot,
) -> None:
    payload = await use_case.execute(config, editing, DebugSnapshot(), repository)

    assert payload.as_activity() == {
        "type": 0,
        "details": "Editing Python",
        "state": "Line 42 of 1,200",
        "startTimestamp": NOW_MS,
        "largeImageKey": "python",
        "largeImageText": "A PYTHON file",
        "smallImageKey": "vscode",
        "smallImageText": "Visual Studio Code",
        "buttons": [{"label": "View Repository", "url": "https://github.com/owner/repo"}],
    }


@pytest.mark.anyio
async def test_unstattable_path_falls_back_to_in_memory_length(config: PresenceConfig) -> None:
    use_case = BuildPresenceUseCase(FixedIconResolver(), LocalFileSizeProbe(), clock=lambda: NOW)
    editor = EditorSnapshot(
        app_name="Visual Studio Code",
        document=DocumentSnapshot(
            path="/tmp/a\x00b.py", language_id="python", line_count=3, text_length=77
        ),
    )
    config = dataclasses.replace(config, state=dataclasses.replace(config.state, editing="{file_size}"))

    payload = await use_case.execute(config, editor, DebugSnapshot(), SourceControlSnapshot())

    assert payload.state == "77 bytes"
