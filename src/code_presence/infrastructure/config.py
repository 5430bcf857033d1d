"""Application configuration, loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from code_presence.domain.entities import PresenceConfig, SlotTemplates


class Settings(BaseSettings):
    """Central configuration loaded from ``PRESENCE_*`` env vars (or ``.env``)."""

    model_config = SettingsConfigDict(
        env_prefix="PRESENCE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000
    file_size_timeout_seconds: float = 2.0

    # Toggles
    swap_images: bool = False
    hide_details: bool = False
    hide_state: bool = False
    hide_repository_button: bool = False
    hide_timestamp: bool = False

    # Templates
    details_idling: str = "Idling"
    details_editing: str = "Editing a {Lang} file"
    details_debugging: str = "Debugging a {Lang} file"
    state_idling: str = "Idling"
    state_editing: str = "Line {current_line}:{current_column} of {total_lines} ({file_size})"
    state_debugging: str = "On {git_branch} in {git_repo_name}"
    large_image: str = "Editing a {LANG} file"
    large_image_idling: str = "Idling"
    small_image: str = "Coding in {app_name}"

    def presence_config(self) -> PresenceConfig:
        """Return the user options as a domain :class:`PresenceConfig`."""
        return PresenceConfig(
            details=SlotTemplates(
                idling=self.details_idling,
                editing=self.details_editing,
                debugging=self.details_debugging,
            ),
            state=SlotTemplates(
                idling=self.state_idling,
                editing=self.state_editing,
                debugging=self.state_debugging,
            ),
            large_image=self.large_image,
            large_image_idling=self.large_image_idling,
            small_image=self.small_image,
            swap_images=self.swap_images,
            hide_details=self.hide_details,
            hide_state=self.hide_state,
            hide_repository_button=self.hide_repository_button,
            hide_timestamp=self.hide_timestamp,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton application settings (cached after first call)."""
    return Settings()
