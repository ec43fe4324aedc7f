"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here — no scattered magic strings.
"""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.shared.logging import resolve_log_level

DEFAULT_MESSAGES_DIR = Path(__file__).resolve().parent.parent / "resources" / "i18n"


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level name. Unknown names are rejected.
        error_uri: URI of the error documentation, returned as the
            ``type`` of every problem-details response.
        default_locale: Locale used when the client sends no usable
            ``Accept-Language`` header, and for log messages.
        base_locale: Language of the base ``messages.yaml`` bundle.
        messages_dir: Directory holding the ``messages*.yaml`` bundles.
        rate_limit_enabled: Toggle request rate limiting.
        rate_limit_default: Default rate limit for all endpoints.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "User Directory"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    error_uri: str = "https://example.com/errors"
    default_locale: str = "en"
    base_locale: str = "en"
    messages_dir: Path = DEFAULT_MESSAGES_DIR
    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        resolve_log_level(value)
        return value.upper()


settings = Settings()
