"""Configuration management for the event editor."""

from pathlib import Path
from typing import Literal, Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class EditorSettings(BaseSettings):
    """Event editor configuration."""

    # Environment switch gating the tier/ticket editor
    environment: str = Field(default="", validation_alias="OC_ENV")
    tickets_environments: list[str] = Field(
        default=["e2e", "ci"], validation_alias="EVENT_EDITOR_TICKETS_ENVIRONMENTS"
    )

    # Source record key deciding when a refreshed record replaces the draft
    draft_identity_key: Literal["name", "id"] = Field(
        default="name", validation_alias="EVENT_EDITOR_IDENTITY_KEY"
    )

    # Localization
    messages_file: Optional[Path] = Field(
        default=None, validation_alias="EVENT_EDITOR_MESSAGES_FILE"
    )

    # Logging
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: Optional[Path] = Field(default=None, validation_alias="LOG_FILE")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @property
    def tickets_editor_enabled(self) -> bool:
        return self.environment in self.tickets_environments


# Global settings instance
settings = EditorSettings()
