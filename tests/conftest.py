import pytest

from entrycache.cache.file_cache import FileCache

_ENV_VARS = (
    "ENTRYCACHE_APP_NAME",
    "ENTRYCACHE_CACHE_DIR",
    "ENTRYCACHE_ENTRY_SUFFIX",
    "ENTRYCACHE_VIEWER",
    "ENTRYCACHE_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep tests away from the real user cache/config dirs and any project config."""
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path / "xdg-cache"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-config"))
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)


@pytest.fixture
def cache_dir(tmp_path):
    return tmp_path / "cache"


@pytest.fixture
def file_cache(cache_dir):
    cache = FileCache(cache_dir=cache_dir)
    yield cache
    cache.close()
