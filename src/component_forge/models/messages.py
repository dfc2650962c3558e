"""Structured chat request sent to the model."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TextPart:
    """Plain text content."""

    text: str


@dataclass(frozen=True)
class ImagePart:
    """Inlined image attachment."""

    data: bytes
    mime_type: str = "image/png"


@dataclass(frozen=True)
class ChatPrompt:
    """One system instruction plus one user message."""

    system: str
    parts: list[TextPart | ImagePart] = field(default_factory=list)

    @property
    def has_image(self) -> bool:
        return any(isinstance(p, ImagePart) for p in self.parts)

    @property
    def text(self) -> str:
        return "\n".join(p.text for p in self.parts if isinstance(p, TextPart))
