"""Process settings for the notifier context.

Protean infrastructure (providers, brokers, event store) is configured in
``domain.toml``. The knobs below tune the dispatch pipeline itself and are
read from ``NOTIFIER_*`` environment variables or a ``.env`` file.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class NotifierSettings(BaseSettings):
    max_workers: int = Field(default=8, ge=1)
    default_language: str = "es"
    slot_confirmation_minutes: int = Field(default=10, ge=1)
    notify_whitelist: list[str] = Field(default_factory=list)
    seed_default_templates: bool = True

    model_config = SettingsConfigDict(
        env_prefix="NOTIFIER_",
        env_file=".env",
        extra="ignore",
    )


_settings: NotifierSettings | None = None


def get_settings() -> NotifierSettings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = NotifierSettings()
    return _settings


def reset_settings():
    """Drop cached settings (useful for testing)."""
    global _settings
    _settings = None
