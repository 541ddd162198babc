"""Log Parser - Settings"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from .patterns import DEFAULT_ENCODING, DEFAULT_TOP_N


class Settings(BaseSettings):
    """Defaults loaded from LOGPARSER_* environment variables or a .env file."""

    model_config = SettingsConfigDict(
        env_prefix="LOGPARSER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    top_n: int = DEFAULT_TOP_N
    log_level: str = "WARNING"

    # Encoding of the access log files being parsed
    encoding: str = DEFAULT_ENCODING


@lru_cache
def get_settings() -> Settings:
    return Settings()
