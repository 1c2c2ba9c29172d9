"""Configuration settings for the content analyzer."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # OCR settings
    tesseract_cmd: Optional[str] = None  # Path to the tesseract binary when not on PATH
    ocr_timeout_seconds: float = 0  # 0 means no timeout
    ocr_retry_attempts: int = 2  # Attempts per page when tesseract times out

    # Input limits
    max_file_size_mb: int = 50

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"  # "console" or "json"

    @property
    def max_file_size_bytes(self) -> int:
        """Maximum file size in bytes."""
        return self.max_file_size_mb * 1024 * 1024


# Global settings instance
settings: Optional[Settings] = None


def load_settings() -> Settings:
    """Load settings from environment variables and .env file."""
    global settings
    settings = Settings()
    return settings


def get_settings() -> Settings:
    """Get the global settings instance, loading if necessary."""
    global settings
    if settings is None:
        settings = load_settings()
    return settings
