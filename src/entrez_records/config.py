"""Application configuration."""

from functools import lru_cache

from pydantic_settings import BaseSettings

from entrez_records.constants import (
    DEFAULT_TIMEOUT,
    DEFAULT_TOOL,
    NCBI_RATE_LIMIT,
    NCBI_RATE_LIMIT_WITH_KEY,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # NCBI identification
    ncbi_api_key: str = ""
    ncbi_email: str = ""
    ncbi_tool: str = DEFAULT_TOOL

    # HTTP
    timeout_seconds: float = DEFAULT_TIMEOUT
    requests_per_second: float | None = None  # None -> NCBI default for the key

    # App Settings
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"
        frozen = True

    @property
    def effective_rate_limit(self) -> float:
        """Requests per second allowed against NCBI for these credentials."""
        if self.requests_per_second is not None:
            return self.requests_per_second
        return NCBI_RATE_LIMIT_WITH_KEY if self.ncbi_api_key else NCBI_RATE_LIMIT


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
