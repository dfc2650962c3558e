"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .validate import (
    ValidationError,
    GenerationRequest,
    FormatRequest,
    decode_image,
)
from .logging_config import configure_logging, get_logger, LogContext
from .credentials import CredentialStore, MissingCredentialError
from .staging import ImageStaging


def create_container(settings: Settings | None = None, **kwargs):
    """Create dependency injection container (lazy import to avoid circular deps)."""
    from .container import create_container as _create_container

    return _create_container(settings, **kwargs)


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Validation
    "ValidationError",
    "GenerationRequest",
    "FormatRequest",
    "decode_image",
    # Logging
    "configure_logging",
    "get_logger",
    "LogContext",
    # Credentials
    "CredentialStore",
    "MissingCredentialError",
    # Staging
    "ImageStaging",
    # DI
    "create_container",
]
