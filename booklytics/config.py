"""Runtime configuration: env-driven via pydantic-settings.

Reads from a .env file and BOOKLYTICS_* environment variables.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from booklytics.models.events import EventNaming


class AnalyticsSettings(BaseSettings):
    """Analytics configuration with environment variable overrides.

    Examples
    --------
    Override via environment::

        export BOOKLYTICS_ENVIRONMENT=staging
        export BOOKLYTICS_EVENT_NAMING=scoped
        export BOOKLYTICS_SINKS='["api", "firebase"]'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="BOOKLYTICS_",
        env_file_encoding="utf-8",
    )

    # Runtime environment
    environment: str = "development"
    log_level: str = "INFO"

    # Event naming on the wire
    event_naming: EventNaming = EventNaming.PLAIN
    event_prefix: str = ""

    # Sinks the CLI composes, in delivery order: "api", "firebase"
    sinks: list[str] = ["api"]

    @property
    def is_production(self) -> bool:
        """Whether running in production mode."""
        return self.environment == "production"

    @property
    def resolved_prefix(self) -> str:
        """The explicit event prefix, else ``Production-`` in production."""
        if self.event_prefix:
            return self.event_prefix
        return "Production-" if self.is_production else ""


# Module-level singleton, import as `from booklytics.config import settings`
settings = AnalyticsSettings()
