"""Application configuration."""

from functools import lru_cache

from pydantic_settings import BaseSettings

from ncbi_toolkit.constants import DEFAULT_TIMEOUT, NCBI_BASE_URL


class Settings(BaseSettings):
    """Settings loaded from NCBI_* environment variables."""

    # API Keys
    api_key: str = ""

    # E-utilities
    base_url: str = NCBI_BASE_URL
    timeout_seconds: float = DEFAULT_TIMEOUT

    # App Settings
    log_level: str = "INFO"

    class Config:
        env_prefix = "NCBI_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        frozen = True


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
