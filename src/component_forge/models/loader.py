"""Model Loader - Gemini chat completion."""

from typing import Any, Protocol

import google.generativeai as genai

from ..core import get_logger
from .config import GeminiConfig
from .messages import ChatPrompt, ImagePart, TextPart


logger = get_logger(__name__)


class ModelLoadError(Exception):
    """Model loading failed."""
    pass


class ChatModel(Protocol):
    """Anything that turns a chat prompt into reply text."""

    def invoke(self, prompt: ChatPrompt) -> str: ...


def to_content_parts(prompt: ChatPrompt) -> list[Any]:
    """Convert prompt parts to Gemini content parts."""
    parts: list[Any] = []
    for part in prompt.parts:
        if isinstance(part, TextPart):
            parts.append(part.text)
        elif isinstance(part, ImagePart):
            parts.append({"mime_type": part.mime_type, "data": part.data})
    return parts


class GeminiModel:
    """Gemini API wrapper."""

    def __init__(self, config: GeminiConfig):
        self.config = config
        genai.configure(api_key=config.api_key)

        self.generation_config = genai.GenerationConfig(
            temperature=config.temperature,
            max_output_tokens=config.max_tokens,
        )

        logger.info("model_loaded", model=config.model_name)

    def invoke(self, prompt: ChatPrompt) -> str:
        """Single non-streaming chat completion."""
        # The system instruction is bound to the model object, so build one per call
        model = genai.GenerativeModel(
            model_name=self.config.model_name,
            generation_config=self.generation_config,
            system_instruction=prompt.system,
        )
        try:
            response = model.generate_content(to_content_parts(prompt))
            text = response.text
        except Exception as e:
            logger.error("invoke_error", model=self.config.model_name, error=str(e))
            raise

        logger.info("invoke_complete", model=self.config.model_name, chars=len(text))
        return text


class ModelLoader:
    """Model construction."""

    @classmethod
    def load(cls, config: GeminiConfig) -> GeminiModel:
        """Load model with config."""
        logger.info("loading", model=config.model_name)
        try:
            return GeminiModel(config)
        except Exception as e:
            logger.error("load_failed", error=str(e))
            raise ModelLoadError(f"Failed to load {config.model_name}") from e
