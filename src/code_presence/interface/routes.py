"""API routes: thin controllers that delegate to the use case."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from code_presence.infrastructure.config import Settings, get_settings
from code_presence.interface.dependencies import get_use_case
from code_presence.interface.schemas import (
    ErrorResponse,
    PresenceRequest,
    PresenceResponse,
)
from code_presence.services.build_presence import BuildPresenceUseCase

router = APIRouter()


@router.post(
    "/presence",
    response_model=PresenceResponse,
    response_model_exclude_none=True,
    responses={
        422: {"model": ErrorResponse, "description": "Malformed or inconsistent editor snapshot"},
    },
)
async def presence(
    body: PresenceRequest,
    settings: Settings = Depends(get_settings),
    use_case: BuildPresenceUseCase = Depends(get_use_case),
) -> PresenceResponse:
    """Synthesize the presence payload for one editor refresh."""
    if body.config is not None:
        settings = settings.model_copy(update=body.config.model_dump(exclude_none=True))

    payload = await use_case.execute(
        settings.presence_config(),
        body.editor_snapshot(),
        body.debug_snapshot(),
        body.source_control_snapshot(),
        previous_start=body.previous_start_timestamp,
    )
    return PresenceResponse.model_validate(payload.as_activity())
