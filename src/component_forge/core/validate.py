"""Input validation with strong typing."""

import base64
import binascii
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Validation limits
MAX_DESCRIPTION_LENGTH = 10_000
MAX_IMAGE_SIZE = 20 * 1024 * 1024  # 20MB inline image limit


class ValidationError(Exception):
    """Validation failed."""

    pass


class RequestValidator(BaseModel):
    """Base validator with strict configuration."""

    model_config = ConfigDict(
        validate_assignment=True, extra="forbid", frozen=True  # Immutable once sent
    )


def _non_empty(v: str) -> str:
    stripped = v.strip()
    if not stripped:
        raise ValueError("Description cannot be empty")
    return stripped


def decode_image(data: str) -> bytes:
    """
    Decode a reference image sent by the panel.

    Accepts a browser data URL (``data:image/png;base64,...``) or bare
    base64 text.

    Raises:
        ValidationError: If the payload is not valid base64
    """
    payload = data.split(",", 1)[1] if data.startswith("data:") else data
    try:
        decoded = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValidationError(f"Reference image is not valid base64: {e}") from e
    if not decoded:
        raise ValidationError("Reference image is empty")
    if len(decoded) > MAX_IMAGE_SIZE:
        raise ValidationError(
            f"Reference image size {len(decoded)} bytes exceeds maximum {MAX_IMAGE_SIZE} bytes"
        )
    return decoded


class GenerationRequest(RequestValidator):
    """Validated component generation request."""

    description: str = Field(min_length=1, max_length=MAX_DESCRIPTION_LENGTH)
    reference_image: bytes | None = None
    want_storybook: bool = False
    want_mock_data: bool = False
    create_file: bool = True
    output_path: Path | None = None

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str) -> str:
        """Ensure description is non-empty after stripping."""
        return _non_empty(v)

    @classmethod
    def from_panel(
        cls,
        text: str,
        image: str | None = None,
        *,
        create_file: bool = True,
        create_storybook: bool = False,
        create_mock_data: bool = False,
        output_path: str | None = None,
    ) -> "GenerationRequest":
        """Build a request from panel/CLI values, decoding the image payload."""
        try:
            return cls(
                description=text,
                reference_image=decode_image(image) if image else None,
                want_storybook=create_storybook,
                want_mock_data=create_mock_data,
                create_file=create_file,
                output_path=Path(output_path) if output_path else None,
            )
        except ValueError as e:
            # pydantic's ValidationError subclasses ValueError
            raise ValidationError(f"Validation failed: {e}") from e


class FormatRequest(RequestValidator):
    """Validated description formatting request."""

    text: str = Field(min_length=1, max_length=MAX_DESCRIPTION_LENGTH)

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        """Ensure text is non-empty after stripping."""
        return _non_empty(v)

    @classmethod
    def from_panel(cls, text: str) -> "FormatRequest":
        try:
            return cls(text=text)
        except ValueError as e:
            raise ValidationError(f"Validation failed: {e}") from e
