"""
Library settings using Pydantic Settings.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration loaded from BARCODEID_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BARCODEID_",
        # Prefer local overrides while keeping .env as the default source
        env_file=(".env.local", ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Classification
    code39_threshold: int = Field(
        12, ge=1, description="Digit-only barcodes longer than this are CODE39"
    )
    legacy_validate_threshold: bool = Field(
        False,
        description="Use threshold + 1 when validate() identifies an untyped barcode",
    )

    @property
    def validate_threshold(self) -> int:
        """CODE39 length threshold used by validate() on untyped records."""
        if self.legacy_validate_threshold:
            return self.code39_threshold + 1
        return self.code39_threshold


@lru_cache
def get_settings() -> Settings:
    """Get cached settings."""
    return Settings()
