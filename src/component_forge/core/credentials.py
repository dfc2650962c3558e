"""API credential storage with interactive fallback."""

import json
from collections.abc import Callable
from pathlib import Path

from .config import Settings
from .logging_config import get_logger

logger = get_logger(__name__)


class MissingCredentialError(Exception):
    """No API key configured and the user declined to enter one."""

    pass


KeyPrompt = Callable[[], str | None]


class CredentialStore:
    """
    Single persisted API key, read lazily.

    Lookup order is the configured ``api_key`` setting, then the
    credentials file. When both are empty the ``prompt`` callable is asked
    once and a non-empty answer is written back to the credentials file.
    """

    def __init__(self, settings: Settings, prompt: KeyPrompt | None = None) -> None:
        self.path: Path = settings.credentials_file
        self._prompt = prompt
        self._key: str | None = settings.api_key or None

    def get(self) -> str | None:
        """Return the stored key without prompting."""
        if self._key:
            return self._key
        self._key = self._read_file()
        return self._key

    def require(self, purpose: str = "generate components") -> str:
        """
        Return the key, prompting the user when none is stored.

        Raises:
            MissingCredentialError: If the user cancels the prompt
        """
        key = self.get()
        if key:
            return key

        entered = self._prompt() if self._prompt else None
        entered = entered.strip() if entered else ""
        if not entered:
            logger.warning("credential_missing", purpose=purpose)
            raise MissingCredentialError(f"API key is required to {purpose}.")

        self.save(entered)
        return entered

    def save(self, key: str) -> None:
        """Persist the key to the credentials file."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({"api_key": key}), encoding="utf-8")
        self._key = key
        logger.info("credential_saved", path=str(self.path))

    def _read_file(self) -> str | None:
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("credential_file_unreadable", path=str(self.path), error=str(e))
            return None
        if not isinstance(data, dict):
            return None
        return data.get("api_key") or None
