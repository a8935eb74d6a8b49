"""Cached file model."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel


class CachedFile(BaseModel):
    """A file currently materialized in the cache directory."""

    name: str
    path: Path
    size_bytes: int = 0

    @property
    def uri(self) -> str:
        return self.path.as_uri()
