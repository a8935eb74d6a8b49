"""Package-level default configuration values."""

from __future__ import annotations

from typing import Any

# Fixed application identifier handed to the platform directory resolver
DEFAULT_APP_NAME = "entrycache"

# None = resolve through the platform directory resolver
DEFAULT_CACHE_DIR = None

# Suffix for generated entry file names
DEFAULT_ENTRY_SUFFIX = ".html"

# None = the system default browser
DEFAULT_VIEWER = None

# Log level
DEFAULT_LOG_LEVEL = "WARNING"


def get_defaults() -> dict[str, Any]:
    """Return all defaults as a flat dictionary for merging."""
    return {
        "app_name": DEFAULT_APP_NAME,
        "cache_dir": DEFAULT_CACHE_DIR,
        "entry_suffix": DEFAULT_ENTRY_SUFFIX,
        "viewer": DEFAULT_VIEWER,
        "log_level": DEFAULT_LOG_LEVEL,
    }
