"""Component Generator - one model call per user action."""

from collections.abc import Callable
from dataclasses import dataclass

from ..core import (
    CredentialStore,
    FormatRequest,
    GenerationRequest,
    ImageStaging,
    LogContext,
    Settings,
    get_logger,
)
from ..models import ChatModel, GeminiConfig, ModelLoader
from ..parser import GenerationResult, ResponseParser
from ..placement import ComponentWriter, PlacementError, WrittenComponent
from .prompts import PromptBuilder


logger = get_logger(__name__)

ModelFactory = Callable[[GeminiConfig], ChatModel]


class ComponentGenerator:
    """Builds the prompt, calls the model and parses the reply."""

    def __init__(
        self,
        settings: Settings,
        credentials: CredentialStore,
        model_factory: ModelFactory = ModelLoader.load,
    ) -> None:
        self.settings = settings
        self.credentials = credentials
        self.model_factory = model_factory

    def generate(self, request: GenerationRequest, staging: ImageStaging | None = None) -> GenerationResult:
        """
        Generate a component.

        Args:
            request: Validated generation request
            staging: Caller-owned staging area for the reference image

        Raises:
            MissingCredentialError: If no API key is available
            Exception: Upstream failures propagate unchanged
        """
        api_key = self.credentials.require("generate components")

        if request.reference_image and staging is not None:
            staging.stage(request.reference_image)

        prompt = PromptBuilder.build_generation(request.description, request.reference_image)
        model = self.model_factory(GeminiConfig.for_generation(self.settings, api_key))

        logger.info("generate", description=request.description[:50], image=prompt.has_image)
        raw = model.invoke(prompt)

        return ResponseParser(description=request.description).parse(raw)


class DescriptionFormatter:
    """Rewrites a brief description into a structured one."""

    def __init__(
        self,
        settings: Settings,
        credentials: CredentialStore,
        model_factory: ModelFactory = ModelLoader.load,
    ) -> None:
        self.settings = settings
        self.credentials = credentials
        self.model_factory = model_factory

    def format(self, request: FormatRequest) -> str:
        api_key = self.credentials.require("format descriptions")
        model = self.model_factory(GeminiConfig.for_formatting(self.settings, api_key))
        logger.info("format_description", length=len(request.text))
        return model.invoke(PromptBuilder.build_formatting(request.text)).strip()


@dataclass
class GenerationOutcome:
    """Result of one end-to-end user action."""

    result: GenerationResult
    written: WrittenComponent | None = None
    write_error: str | None = None


class ComponentService:
    """Generation followed by optional file creation."""

    def __init__(self, generator: ComponentGenerator, writer: ComponentWriter) -> None:
        self.generator = generator
        self.writer = writer

    def run(self, request: GenerationRequest, staging: ImageStaging | None = None) -> GenerationOutcome:
        """
        Generate and, when requested, write the component.

        A filesystem failure does not discard the generated result; it is
        reported in ``write_error`` instead.
        """
        with LogContext(description=request.description[:50]):
            result = self.generator.generate(request, staging)
            outcome = GenerationOutcome(result=result)
            if not request.create_file:
                return outcome

            try:
                outcome.written = self.writer.write(
                    result,
                    want_storybook=request.want_storybook,
                    want_mock_data=request.want_mock_data,
                    output_folder=request.output_path,
                )
            except PlacementError as e:
                logger.error("placement_failed", error=str(e))
                outcome.write_error = str(e)
            return outcome
