"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from code_presence.interface.error_handlers import register_error_handlers
from code_presence.interface.routes import router


def create_app() -> FastAPI:
    """Build and wire the FastAPI application."""
    app = FastAPI(
        title="Code Presence",
        version="1.0.0",
        description=(
            "Turns a snapshot of editor, debugger and git state into a rich "
            "presence payload: what the user is doing, in which file, on "
            "which branch, and since when."
        ),
    )

    register_error_handlers(app)
    app.include_router(router)

    # ── Health check (simple liveness probe) ────────────────────────────

    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
