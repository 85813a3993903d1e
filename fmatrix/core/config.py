"""
Library configuration.

Settings are read from ``FMATRIX_``-prefixed environment variables
(or a ``.env`` file) and cached.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from fmatrix import __version__


class Settings(BaseSettings):
    """Library settings"""

    model_config = SettingsConfigDict(
        env_prefix="FMATRIX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "fmatrix"
    APP_VERSION: str = __version__

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: Literal["json", "text"] = "text"
    LOG_FILE: Optional[str] = None


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


# Global settings instance
settings = get_settings()
