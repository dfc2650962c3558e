"""
Placement Resolver
Chooses the components directory and writes a component's files into it.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from ..core import get_logger
from ..parser.models import GenerationResult
from ..scaffold import ScaffoldGenerator

logger = get_logger(__name__)


CONVENTIONAL_DIRS = ("components", "src/components", "app/components")
DEFAULT_DIR = "components"

FolderChooser = Callable[[], Path | None]


class PlacementError(Exception):
    """Component files could not be placed or written."""

    pass


def pascal_case(name: str) -> str:
    return name[:1].upper() + name[1:]


class PlacementResolver:
    """Resolves where a component directory is created."""

    def __init__(self, workspace_root: Path | None, choose_folder: FolderChooser | None = None) -> None:
        self.workspace_root = workspace_root
        self.choose_folder = choose_folder

    def resolve(self, output_folder: Path | None = None) -> Path:
        """
        Pick the components directory.

        Order: explicit folder (created if missing), the first existing
        conventional directory, the user's choice, then ``components`` at
        the workspace root.

        Raises:
            PlacementError: If no workspace is open or a directory cannot be created
        """
        if output_folder is not None:
            return self.ensure_dir(Path(output_folder))

        if self.workspace_root is None:
            raise PlacementError("No workspace folder is open.")
        root = Path(self.workspace_root)
        if not root.is_dir():
            raise PlacementError(f"Workspace folder does not exist: {root}")

        for relative in CONVENTIONAL_DIRS:
            candidate = root / relative
            if candidate.is_dir():
                logger.debug("conventional_dir", path=str(candidate))
                return candidate

        chosen = self.choose_folder() if self.choose_folder else None
        if chosen:
            logger.info("folder_chosen", path=str(chosen))
            return self.ensure_dir(Path(chosen))

        logger.info("default_dir", path=str(root / DEFAULT_DIR))
        return self.ensure_dir(root / DEFAULT_DIR)

    @staticmethod
    def ensure_dir(path: Path) -> Path:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise PlacementError(f"Cannot create directory {path}: {e}") from e
        return path


@dataclass
class WrittenComponent:
    """Files written for one component."""

    directory: Path
    files: list[Path] = field(default_factory=list)

    @property
    def component_file(self) -> Path:
        return self.files[0]


class ComponentWriter:
    """Writes the main file plus scaffold files; no rollback on failure."""

    def __init__(self, resolver: PlacementResolver, scaffold: ScaffoldGenerator | None = None) -> None:
        self.resolver = resolver
        self.scaffold = scaffold or ScaffoldGenerator()

    def write(
        self,
        result: GenerationResult,
        want_storybook: bool = False,
        want_mock_data: bool = False,
        output_folder: Path | None = None,
    ) -> WrittenComponent:
        """
        Write ``<Name>/<Name>.tsx``, ``index.ts`` and optional scaffold files.

        Raises:
            PlacementError: On any filesystem failure (already written files remain)
        """
        name = pascal_case(result.component_name)
        base = self.resolver.resolve(output_folder)
        directory = self.resolver.ensure_dir(base / name)
        written = WrittenComponent(directory=directory)

        contents = [(f"{name}.tsx", result.component_code)]
        contents += [
            (f.filename, f.content)
            for f in self.scaffold.generate(name, result.component_code, want_storybook, want_mock_data)
        ]

        for filename, content in contents:
            path = directory / filename
            try:
                path.write_text(content, encoding="utf-8")
            except OSError as e:
                logger.error("write_failed", path=str(path), error=str(e))
                raise PlacementError(f"Cannot write {path}: {e}") from e
            written.files.append(path)

        logger.info("component_written", name=name, directory=str(directory), files=len(written.files))
        return written
