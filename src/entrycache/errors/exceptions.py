"""Custom exception hierarchy for entrycache."""

from __future__ import annotations

from pathlib import Path
from typing import Any


class EntryCacheError(Exception):
    """Base exception for all entrycache errors."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message


class ResolutionError(EntryCacheError):
    """No cache directory location could be determined.

    Fatal for cache construction. Raised when the platform directory
    resolver fails, e.g. the host has no resolvable home or profile.
    """

    def __init__(
        self,
        message: str = "",
        app_name: str = "",
        original: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.app_name = app_name
        self.original = original


class FilesystemError(EntryCacheError):
    """Creating, writing or removing something under the cache directory failed.

    Examples: disk full, permission denied, a cached file still held open
    by the viewer while the directory is being removed.
    """

    def __init__(
        self,
        message: str = "",
        path: Path | None = None,
        original: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.original = original


class CacheClosedError(EntryCacheError):
    """A write-capable operation was attempted on a disposed cache."""

    def __init__(self, message: str = "", cache_dir: Path | None = None) -> None:
        super().__init__(message)
        self.cache_dir = cache_dir


class ViewerError(EntryCacheError):
    """A cached file could not be handed to the external viewer."""

    def __init__(
        self,
        message: str = "",
        path: Path | None = None,
        viewer: str | None = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.viewer = viewer
