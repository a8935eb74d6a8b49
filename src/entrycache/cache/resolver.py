"""Platform cache directory resolution."""

from __future__ import annotations

from pathlib import Path

import platformdirs

from entrycache.errors.exceptions import ResolutionError


def resolve_cache_dir(app_name: str) -> Path:
    """Return the platform cache directory for ``app_name``.

    Raises ResolutionError if no location can be determined.
    """
    if not app_name:
        raise ResolutionError("Application name must not be empty", app_name=app_name)
    try:
        path = platformdirs.user_cache_path(app_name, appauthor=False)
    except (OSError, KeyError, RuntimeError) as e:
        raise ResolutionError(
            f"Unable to resolve a cache directory for '{app_name}': {e}",
            app_name=app_name,
            original=e,
        ) from e
    return path.expanduser().absolute()
