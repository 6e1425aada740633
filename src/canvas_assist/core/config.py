"""Configuration Management."""

import os
from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Application settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="CANVAS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Model
    gemini_api_key: str = Field(
        default_factory=lambda: os.getenv("GEMINI_API_KEY", ""), description="Gemini API key"
    )
    gemini_model: str = Field(default="gemini-1.5-flash-latest", description="Gemini model name")
    gemini_base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        description="Gemini REST endpoint",
    )
    gemini_temperature: float = Field(default=0.1, ge=0.0, le=2.0, description="Model temperature")
    gemini_max_tokens: int = Field(default=1024, gt=0, description="Max output tokens")
    gemini_top_p: float = Field(default=0.8, ge=0.0, le=1.0, description="Nucleus sampling")
    gemini_top_k: int = Field(default=10, ge=1, le=100, description="Top-k sampling")
    model_timeout: float = Field(default=15.0, gt=0, description="Model request timeout (seconds)")
    require_key_prefix: str = Field(
        default="AIza", description="Required API key prefix (empty disables the check)"
    )

    # Circuit breaker
    breaker_fail_max: int = Field(default=5, gt=0, description="Failures before the breaker opens")
    breaker_reset_timeout: int = Field(default=30, gt=0, description="Breaker reset (seconds)")

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    # Validation
    max_command_length: int = Field(default=2000, gt=0, description="Max command length")
    max_markup_length: int = Field(default=8000, gt=0, description="Max markup kept in context")

    @property
    def has_model_credential(self) -> bool:
        """True when a usable model key is configured."""
        key = self.gemini_api_key.strip()
        if not key:
            return False
        return key.startswith(self.require_key_prefix) if self.require_key_prefix else True


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
