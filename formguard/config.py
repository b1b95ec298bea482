"""Library configuration via environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings

from formguard.models import EqualityPolicy
from formguard.reference_data import DEFAULT_ALLOWED_TAGS, DEFAULT_DATE_FORMAT


class Settings(BaseSettings):
    """Defaults for the optional predicate parameters, loaded from FORMGUARD_* env vars."""

    # Predicate defaults
    DATE_FORMAT: str = DEFAULT_DATE_FORMAT
    ALLOWED_TAGS: tuple[str, ...] = DEFAULT_ALLOWED_TAGS
    EQUALITY_POLICY: EqualityPolicy = EqualityPolicy.LOOSE

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "warning"

    model_config = {
        "env_prefix": "FORMGUARD_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    return Settings()
