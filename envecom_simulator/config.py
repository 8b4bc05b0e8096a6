"""Configuration management using Pydantic Settings"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "envecom-simulator"
    log_level: str = "INFO"

    # Reject invalid bill fields instead of coercing them to 0
    strict_validation: bool = False

    # Extraction service (Gemini)
    gemini_api_key: Optional[str] = None
    gemini_api_base: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_model: str = "gemini-3-flash-preview"
    extraction_temperature: float = 0.1

    # HTTP Client
    extraction_timeout_seconds: float = 60.0


settings = Settings()
