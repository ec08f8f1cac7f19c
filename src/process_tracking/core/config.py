# This project was developed with assistance from AI tools.
"""
Tracking subsystem configuration.

Values come from the environment or the project-root .env file; defaults
suit local development.
"""

from pathlib import Path

from db.enums import NotificationLanguage
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root .env, independent of the working directory
_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Tracking settings -- single source of truth for env-driven config."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- App --
    APP_NAME: str = "credit-process-tracking"

    # -- Notifications --
    DEFAULT_NOTIFICATION_LANGUAGE: NotificationLanguage = Field(
        default=NotificationLanguage.ES,
        description="Language used for milestone notifications when the caller passes none.",
    )
    FRONTEND_URL: str = Field(
        default="http://localhost:3000",
        description="Client portal URL used as the call-to-action link in notifications.",
    )

    # -- Timeline --
    TIMELINE_DEFAULT_LIMIT: int = Field(
        default=50,
        description="Page size when a timeline query does not specify one.",
    )
    TIMELINE_MAX_LIMIT: int = Field(
        default=500,
        description="Largest page a single timeline query may request.",
    )
    RECENT_ACTIVITY_LIMIT: int = Field(
        default=5,
        description="Timeline events included in the dashboard summary.",
    )

    # -- Next steps --
    NEXT_STEPS_LIMIT: int = Field(
        default=5,
        description="Maximum recommendations returned by the next-steps advisor.",
    )


settings = Settings()
