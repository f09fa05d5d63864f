"""
bandwagon Settings Configuration
Loads configuration from environment variables
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings

DEFAULT_BASE_URL = "https://api.64clouds.com"


class Settings(BaseSettings):
    """Client settings loaded from environment."""

    # Credentials
    BANDWAGON_VEID: str = ""
    BANDWAGON_API_KEY: str = ""
    BANDWAGON_CREDENTIALS_FILE: str = ""

    # API
    BANDWAGON_BASE_URL: str = DEFAULT_BASE_URL
    BANDWAGON_RAISE_ON_API_ERROR: bool = False

    # Race
    BANDWAGON_FANOUT: int = 20
    BANDWAGON_DEADLINE_MS: int = 3000
    BANDWAGON_FAIL_FAST: bool = False
    BANDWAGON_ATTEMPT_TIMEOUT: float = 5.0

    @field_validator("BANDWAGON_FANOUT")
    @classmethod
    def check_fanout(cls, v):
        if v < 1:
            raise ValueError("BANDWAGON_FANOUT must be at least 1")
        return v

    @field_validator("BANDWAGON_DEADLINE_MS")
    @classmethod
    def check_deadline(cls, v):
        if v <= 0:
            raise ValueError("BANDWAGON_DEADLINE_MS must be positive")
        return v

    @field_validator("BANDWAGON_BASE_URL")
    @classmethod
    def strip_base_url(cls, v):
        return v.rstrip("/")

    @property
    def deadline(self) -> float:
        """Race deadline in seconds."""
        return self.BANDWAGON_DEADLINE_MS / 1000.0

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
