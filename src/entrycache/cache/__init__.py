"""Cache subsystem — a session-scoped directory of write-once files."""

from entrycache.cache.file_cache import FileCache, list_cached_files
from entrycache.cache.keys import entry_file_name, hash_content
from entrycache.cache.models import CachedFile
from entrycache.cache.resolver import resolve_cache_dir

__all__ = [
    "FileCache",
    "CachedFile",
    "entry_file_name",
    "hash_content",
    "list_cached_files",
    "resolve_cache_dir",
]
