"""Session-scoped file cache for handing entry content to external viewers.

Content that a browser has to open by path cannot live in a temporary
file: the viewer process may not have read it by the time the temporary
file goes away. FileCache keeps such files in a dedicated directory for
the lifetime of the owning session and empties that directory when the
cache is disposed.
"""

from __future__ import annotations

import contextlib
import logging
import shutil
import weakref
from pathlib import Path
from types import TracebackType
from typing import Any

from entrycache.cache.models import CachedFile
from entrycache.cache.resolver import resolve_cache_dir
from entrycache.config.defaults import DEFAULT_APP_NAME
from entrycache.errors.exceptions import CacheClosedError, FilesystemError

logger = logging.getLogger(__name__)


class FileCache:
    """Directory-backed, write-once cache of named text files.

    The directory listing is the index; nothing is kept in memory once
    written. Cleanup runs exactly once, on ``close()``, on leaving a
    ``with`` block, or when the instance is collected or the interpreter
    exits, whichever comes first. Cleanup never raises.

    Not safe for concurrent use from several threads.
    """

    def __init__(
        self,
        cache_dir: Path | str | None = None,
        app_name: str = DEFAULT_APP_NAME,
    ) -> None:
        if cache_dir is None:
            self._cache_dir = resolve_cache_dir(app_name)
        else:
            self._cache_dir = Path(cache_dir).expanduser().absolute()
        _ensure_dir(self._cache_dir)
        self._finalizer = weakref.finalize(self, _dispose, self._cache_dir)
        logger.debug("File cache ready at %s", self._cache_dir)

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> FileCache:
        """Build a cache from a merged configuration dict."""
        return cls(
            cache_dir=config.get("cache_dir"),
            app_name=config.get("app_name") or DEFAULT_APP_NAME,
        )

    @property
    def cache_dir(self) -> Path:
        return self._cache_dir

    @property
    def closed(self) -> bool:
        return not self._finalizer.alive

    def clear_cache(self) -> None:
        """Empty the cache directory, leaving an empty directory in its place.

        Raises FilesystemError if the directory cannot be removed (a file in
        it may still be held open by a viewer) or recreated.
        """
        self._check_open()
        _reset_dir(self._cache_dir)
        logger.info("Cleared file cache at %s", self._cache_dir)

    def cache_as_file(self, fname: str, content: str) -> Path:
        """Write ``content`` to ``<cache_dir>/<fname>`` unless it already exists.

        NOTE: a name that is already cached is never rewritten, even if
        ``content`` differs. Use names that change with the content
        (see ``entry_file_name``) when that matters.

        Returns the path of the cached file.
        """
        self._check_open()
        path = self._cache_dir / fname
        try:
            # "x" creates the file only if it is absent, atomically
            f = open(path, "x", encoding="utf-8", newline="")
        except FileExistsError as e:
            if path.is_file():
                logger.debug("'%s' already cached, keeping existing file", fname)
                return path
            raise FilesystemError(
                f"Could not cache content as file {path}: not a regular file",
                path=path,
                original=e,
            ) from e
        except (OSError, ValueError) as e:
            raise FilesystemError(
                f"Could not cache content as file {path}: {e}", path=path, original=e
            ) from e

        try:
            with f:
                f.write(content)
        except (OSError, UnicodeError) as e:
            with contextlib.suppress(OSError):
                path.unlink()
            raise FilesystemError(
                f"Could not write cached file {path}: {e}", path=path, original=e
            ) from e

        logger.debug("Cached '%s' (%d chars)", fname, len(content))
        return path

    def contains(self, fname: str) -> bool:
        """Check whether ``fname`` is currently cached. Never raises."""
        if self.closed or not _is_plain_name(fname):
            return False
        try:
            return (self._cache_dir / fname).exists()
        except (OSError, ValueError):
            return False

    def path_for(self, fname: str) -> Path:
        """Path a cached ``fname`` lives at, whether or not it is cached yet."""
        return self._cache_dir / fname

    def entries(self) -> list[CachedFile]:
        """List the files currently in the cache directory, sorted by name."""
        return list_cached_files(self._cache_dir)

    def close(self) -> None:
        """Dispose of the cache, emptying its directory. Safe to call twice."""
        self._finalizer()

    def __enter__(self) -> FileCache:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"FileCache(cache_dir={str(self._cache_dir)!r}, {state})"

    def _check_open(self) -> None:
        if self.closed:
            raise CacheClosedError(
                f"File cache at {self._cache_dir} is closed", cache_dir=self._cache_dir
            )


def _is_plain_name(fname: str) -> bool:
    """True if ``fname`` names an entry directly under a directory."""
    return fname not in ("", ".", "..") and Path(fname).name == fname


def _ensure_dir(cache_dir: Path) -> None:
    try:
        cache_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FilesystemError(
            f"Could not create cache directory {cache_dir}: {e}", path=cache_dir, original=e
        ) from e


def _reset_dir(cache_dir: Path) -> None:
    """Remove the directory tree and recreate it empty."""
    try:
        shutil.rmtree(cache_dir)
    except FileNotFoundError:
        logger.debug("Cache directory %s already gone", cache_dir)
    except OSError as e:
        raise FilesystemError(
            f"Could not remove cache directory {cache_dir}: {e}", path=cache_dir, original=e
        ) from e
    _ensure_dir(cache_dir)


def _dispose(cache_dir: Path) -> None:
    # Runs from close(), GC or interpreter exit; there is no caller to raise to
    try:
        _reset_dir(cache_dir)
    except FilesystemError as e:
        logger.warning("Could not clear file cache at %s: %s", cache_dir, e)
    else:
        logger.debug("Disposed file cache at %s", cache_dir)


def list_cached_files(cache_dir: Path) -> list[CachedFile]:
    """List the files in a cache directory without taking ownership of it."""
    try:
        children = sorted(cache_dir.iterdir())
    except FileNotFoundError:
        return []
    except OSError as e:
        raise FilesystemError(
            f"Could not list cache directory {cache_dir}: {e}", path=cache_dir, original=e
        ) from e

    result: list[CachedFile] = []
    for child in children:
        try:
            if not child.is_file():
                continue
            size = child.stat().st_size
        except OSError:
            # Removed between listing and stat
            logger.debug("Skipping vanished cache entry %s", child)
            continue
        result.append(CachedFile(name=child.name, path=child, size_bytes=size))
    return result
