"""Scoped staging area for reference images."""

import shutil
import tempfile
from pathlib import Path
from types import TracebackType

from .logging_config import get_logger

logger = get_logger(__name__)


class ImageStaging:
    """
    Temp directory holding uploaded reference images for one generation.

    Owned by the caller of the generation flow; the directory is removed
    on every exit path of a ``with`` block. Cleanup failures are logged.
    """

    def __init__(self, prefix: str = "component-forge-") -> None:
        self.directory: Path | None = Path(tempfile.mkdtemp(prefix=prefix))
        self._count = 0

    def stage(self, data: bytes) -> Path:
        """Write image bytes into the staging directory."""
        if self.directory is None:
            raise RuntimeError("Image staging is closed")
        self._count += 1
        path = self.directory / f"reference_{self._count}.png"
        path.write_bytes(data)
        logger.debug("image_staged", path=str(path), size=len(data))
        return path

    def close(self) -> None:
        """Remove staged files (idempotent)."""
        if self.directory is None:
            return
        directory, self.directory = self.directory, None
        try:
            shutil.rmtree(directory)
        except OSError as e:
            logger.warning("staging_cleanup_failed", path=str(directory), error=str(e))

    @property
    def closed(self) -> bool:
        return self.directory is None

    def __enter__(self) -> "ImageStaging":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
