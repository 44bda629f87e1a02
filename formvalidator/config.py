"""Library configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Settings loaded from FORMVALIDATOR_* environment variables."""

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Aggregation
    # When true, disabled validators are ignored by the filled check too,
    # matching how the validity check and the message list treat them.
    FILL_CHECK_SKIPS_DISABLED: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "FORMVALIDATOR_"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
