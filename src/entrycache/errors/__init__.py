"""Error handling — exception hierarchy for the entry cache."""

from entrycache.errors.exceptions import (
    CacheClosedError,
    EntryCacheError,
    FilesystemError,
    ResolutionError,
    ViewerError,
)

__all__ = [
    "EntryCacheError",
    "ResolutionError",
    "FilesystemError",
    "CacheClosedError",
    "ViewerError",
]
