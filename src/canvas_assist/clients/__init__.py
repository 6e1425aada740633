"""Language model clients."""

from .config import GeminiConfig, GeminiModel
from .gemini import GeminiClient, ModelError, ModelTransportError, ModelResponseError

__all__ = [
    "GeminiConfig",
    "GeminiModel",
    "GeminiClient",
    "ModelError",
    "ModelTransportError",
    "ModelResponseError",
]
