"""Entry file names — content-addressed, filesystem-safe."""

from __future__ import annotations

import hashlib

_NAME_HEX_CHARS = 32


def entry_file_name(entry_id: str, content: str, suffix: str = ".html") -> str:
    """Derive a cache file name from an entry's identity and its content.

    The name changes whenever the content does, so a write-once cache
    never serves a stale body under a reused name.
    """
    return hash_content(entry_id + "||" + content)[:_NAME_HEX_CHARS] + suffix


def hash_content(content: str) -> str:
    """Hash text content."""
    return hashlib.sha256(content.encode("utf-8")).hexdigest()
