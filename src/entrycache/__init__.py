"""entrycache — materialize entry content as files for external viewers."""

from entrycache.cache import CachedFile, FileCache, entry_file_name, hash_content
from entrycache.errors import (
    CacheClosedError,
    EntryCacheError,
    FilesystemError,
    ResolutionError,
    ViewerError,
)
from entrycache.viewer import open_in_viewer

__all__ = [
    "FileCache",
    "CachedFile",
    "entry_file_name",
    "hash_content",
    "open_in_viewer",
    "EntryCacheError",
    "ResolutionError",
    "FilesystemError",
    "CacheClosedError",
    "ViewerError",
]
