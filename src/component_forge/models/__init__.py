"""
Models package - Gemini API integration.
"""

from .config import GeminiConfig, GeminiModelName
from .loader import ChatModel, GeminiModel, ModelLoader, ModelLoadError
from .messages import ChatPrompt, ImagePart, TextPart

__all__ = [
    "GeminiConfig",
    "GeminiModel",
    "GeminiModelName",
    "ChatModel",
    "ModelLoader",
    "ModelLoadError",
    "ChatPrompt",
    "ImagePart",
    "TextPart",
]
