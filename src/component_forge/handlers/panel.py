"""Panel Handler - host side of the panel message boundary."""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..agents.generator import ComponentService, DescriptionFormatter
from ..core import CredentialStore, FormatRequest, GenerationRequest, ImageStaging, get_logger
from ..placement import FolderChooser


logger = get_logger(__name__)


class PanelMessage(BaseModel):
    """Base for messages sent by the panel."""

    model_config = ConfigDict(extra="ignore", frozen=True)


class GenerateComponentMessage(PanelMessage):
    command: Literal["generate-component"]
    text: str
    image: str | None = None
    create_file: bool = True
    create_storybook: bool = False
    create_mock_data: bool = False
    output_path: str | None = None


class BrowseFolderMessage(PanelMessage):
    command: Literal["browse-folder"]


class FormatDescriptionMessage(PanelMessage):
    command: Literal["format-description"]
    text: str


class SetApiKeyMessage(PanelMessage):
    command: Literal["set-api-key"]
    key: str


class PingMessage(PanelMessage):
    command: Literal["ping"]


IncomingMessage = Annotated[
    Union[
        GenerateComponentMessage,
        BrowseFolderMessage,
        FormatDescriptionMessage,
        SetApiKeyMessage,
        PingMessage,
    ],
    Field(discriminator="command"),
]
_incoming = TypeAdapter(IncomingMessage)


def error_response(message: str) -> dict[str, Any]:
    return {"command": "error", "message": message}


class PanelHandler:
    """
    Handles panel requests and returns the responses to send back.

    Only one generation runs at a time per handler; the panel disables its
    trigger while waiting, ``busy`` rejects anything that slips through.
    """

    def __init__(
        self,
        service: ComponentService,
        formatter: DescriptionFormatter,
        choose_folder: FolderChooser | None = None,
        credentials: CredentialStore | None = None,
    ) -> None:
        self.service = service
        self.formatter = formatter
        self.choose_folder = choose_folder
        self.credentials = credentials
        self.busy = False

    def handle(self, message: dict[str, Any]) -> list[dict[str, Any]]:
        """Dispatch one panel message."""
        try:
            parsed = _incoming.validate_python(message)
        except PydanticValidationError as e:
            logger.warning("invalid_message", command=message.get("command"), error=str(e))
            return [error_response(f"Invalid message: {message.get('command', 'unknown')}")]

        match parsed:
            case GenerateComponentMessage():
                return self._generate(parsed)
            case FormatDescriptionMessage():
                return self._format(parsed)
            case BrowseFolderMessage():
                return self._browse()
            case SetApiKeyMessage():
                return self._set_api_key(parsed)
            case PingMessage():
                return [{"command": "pong"}]
        return []

    def _generate(self, message: GenerateComponentMessage) -> list[dict[str, Any]]:
        if self.busy:
            return [error_response("A generation is already in progress")]

        self.busy = True
        try:
            request = GenerationRequest.from_panel(
                message.text,
                message.image,
                create_file=message.create_file,
                create_storybook=message.create_storybook,
                create_mock_data=message.create_mock_data,
                output_path=message.output_path,
            )
            with ImageStaging() as staging:
                outcome = self.service.run(request, staging)
        except Exception as e:
            logger.error("generation", error=str(e))
            return [error_response(str(e) or "An error occurred while generating the component.")]
        finally:
            self.busy = False

        response: dict[str, Any] = {"command": "result", "result": outcome.result.to_panel()}
        if outcome.written:
            response["written"] = [str(p) for p in outcome.written.files]
        responses = [response]
        if outcome.write_error:
            responses.append(error_response(outcome.write_error))
        return responses

    def _format(self, message: FormatDescriptionMessage) -> list[dict[str, Any]]:
        try:
            text = self.formatter.format(FormatRequest.from_panel(message.text))
        except Exception as e:
            logger.error("format", error=str(e))
            return [error_response(str(e))]
        return [{"command": "description-formatted", "text": text}]

    def _browse(self) -> list[dict[str, Any]]:
        """Answer every browse request; a cancelled choice carries a null path."""
        if self.choose_folder is None:
            return [error_response("Folder selection is not available on this host")]
        folder = self.choose_folder()
        return [{"command": "folder-selected", "path": str(folder) if folder else None}]

    def _set_api_key(self, message: SetApiKeyMessage) -> list[dict[str, Any]]:
        if self.credentials is None:
            return [error_response("API key storage is not available on this host")]
        key = message.key.strip()
        if not key:
            return [error_response("API key cannot be empty")]
        try:
            self.credentials.save(key)
        except OSError as e:
            logger.error("credential_save_failed", error=str(e))
            return [error_response(f"Could not save API key: {e}")]
        return [{"command": "api-key-saved"}]
