"""Output directory resolution and file writes."""

from .resolver import (
    CONVENTIONAL_DIRS,
    ComponentWriter,
    FolderChooser,
    PlacementError,
    PlacementResolver,
    WrittenComponent,
    pascal_case,
)

__all__ = [
    "CONVENTIONAL_DIRS",
    "ComponentWriter",
    "FolderChooser",
    "PlacementError",
    "PlacementResolver",
    "WrittenComponent",
    "pascal_case",
]
