"""
Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # ==========================================================================
    # Logging
    # ==========================================================================

    log_level: str = "INFO"

    # ==========================================================================
    # Provider selection
    # ==========================================================================

    # Comma-separated, highest priority first (e.g. "azure,google")
    provider_priority: str = "google"

    # ==========================================================================
    # Google Translate (GET, no key)
    # ==========================================================================

    google_base_url: str = "https://translate.googleapis.com/translate_a/single"
    google_max_url_length: int = 1800
    google_chunk_size: int = 200
    google_chunk_delay: float = 0.5

    # ==========================================================================
    # Azure Translator (POST, keyed)
    # ==========================================================================

    azure_translate_key: str = ""
    azure_translate_endpoint: str = "https://api.cognitive.microsofttranslator.com"
    azure_translate_region: str = "global"
    azure_chunk_size: int = 1000
    azure_chunk_delay: float = 0.1

    # ==========================================================================
    # HTTP
    # ==========================================================================

    http_timeout: float = 15.0
    http_retry_attempts: int = 2

    # ==========================================================================
    # Helpers
    # ==========================================================================

    @property
    def provider_priority_list(self) -> list[str]:
        return [p.strip().lower() for p in self.provider_priority.split(",") if p.strip()]

    @property
    def use_azure(self) -> bool:
        """Whether the Azure provider has credentials."""
        return bool(self.azure_translate_key)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
