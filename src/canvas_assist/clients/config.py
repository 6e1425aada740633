"""
Model configuration with strong typing.
Centralized settings for the Gemini REST API.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from canvas_assist.core import Settings


class GeminiModel(str, Enum):
    """Gemini model variants suited to short JSON answers."""

    FLASH_LATEST = "gemini-1.5-flash-latest"  # Default
    FLASH = "gemini-1.5-flash"
    FLASH_8B = "gemini-1.5-flash-8b"  # Ultra-fast, lowest cost
    FLASH_2 = "gemini-2.0-flash"


class GeminiConfig(BaseModel):
    """Type-safe Gemini API configuration."""

    model_config = ConfigDict(frozen=True)  # Immutable for thread safety

    model_name: str = Field(default=GeminiModel.FLASH_LATEST.value)
    api_key: str = Field(..., min_length=1)
    base_url: str = Field(default="https://generativelanguage.googleapis.com/v1beta")

    # Generation parameters
    temperature: float = Field(default=0.1, ge=0.0, le=2.0)
    max_tokens: int = Field(default=1024, ge=1, le=8192)
    top_p: float = Field(default=0.8, ge=0.0, le=1.0)
    top_k: int = Field(default=10, ge=1, le=100)

    # Transport
    timeout: float = Field(default=15.0, gt=0)
    breaker_fail_max: int = Field(default=5, gt=0)
    breaker_reset_timeout: int = Field(default=30, gt=0)

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeminiConfig":
        """Build from application settings."""
        return cls(
            model_name=settings.gemini_model,
            api_key=settings.gemini_api_key,
            base_url=settings.gemini_base_url,
            temperature=settings.gemini_temperature,
            max_tokens=settings.gemini_max_tokens,
            top_p=settings.gemini_top_p,
            top_k=settings.gemini_top_k,
            timeout=settings.model_timeout,
            breaker_fail_max=settings.breaker_fail_max,
            breaker_reset_timeout=settings.breaker_reset_timeout,
        )

    @property
    def endpoint(self) -> str:
        """generateContent URL for the configured model."""
        return f"{self.base_url.rstrip('/')}/models/{self.model_name}:generateContent"

    def generation_config(self) -> dict[str, float | int]:
        """Sampling parameters in REST field names."""
        return {
            "temperature": self.temperature,
            "maxOutputTokens": self.max_tokens,
            "topP": self.top_p,
            "topK": self.top_k,
        }
