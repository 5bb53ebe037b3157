"""
Configuration management for the PDF Summarizer.
Handles environment variables and application settings.
"""

from functools import lru_cache
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",  # Ignore extra fields from environment
    )

    # API Configuration
    app_name: str = Field(default="PDF Summarizer API")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)
    log_level: str = Field(default="INFO")

    # Google Gemini Configuration
    gemini_api_key: Optional[str] = Field(default=None)
    gemini_model: str = Field(default="gemini-2.0-flash-001")
    gemini_temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)

    # File Processing Configuration
    max_file_size_mb: int = Field(default=50, gt=0)

    # Quiz Configuration
    quiz_question_count: int = Field(default=5, ge=1, le=20)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get application settings."""
    return Settings()


def validate_required_settings(settings: Optional[Settings] = None) -> None:
    """Validate that all required settings are present."""
    if settings is None:
        settings = get_settings()

    required_settings = [
        ("GEMINI_API_KEY", settings.gemini_api_key),
    ]

    missing_settings = [
        name for name, value in required_settings
        if not value or not value.strip()
    ]

    if missing_settings:
        raise ValueError(
            f"{', '.join(missing_settings)} not found in environment variables"
        )
