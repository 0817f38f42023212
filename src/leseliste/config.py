import logging
from functools import lru_cache

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import ENV_PREFIX
from .models import StatusFormat, StatusPolicy


class Settings(BaseSettings):
    """
    Schema configuration.

    All variables are prefixed with LL_ (e.g. LL_STATUS_POLICY, LL_LOG_LEVEL).
    """

    # Decoding: "strict" yields Book, "lenient" yields BookRecord
    STATUS_POLICY: StatusPolicy = StatusPolicy.STRICT

    # Encoding: write Book.status as its display text or its symbol
    STATUS_FORMAT: StatusFormat = StatusFormat.LABEL

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Load settings from environment, failing fast on invalid values."""
    try:
        return Settings.model_validate({})
    except ValidationError as e:
        invalid = sorted({str(err["loc"][0]) for err in e.errors()})
        raise SystemExit(
            f"Invalid environment variable(s): {', '.join(f'{ENV_PREFIX}{name}' for name in invalid)}"
        ) from None
