"""Tests for package defaults."""

from entrycache.config.defaults import (
    DEFAULT_APP_NAME,
    DEFAULT_CACHE_DIR,
    DEFAULT_ENTRY_SUFFIX,
    DEFAULT_LOG_LEVEL,
    DEFAULT_VIEWER,
    get_defaults,
)


class TestDefaults:
    def test_default_app_name(self):
        assert DEFAULT_APP_NAME == "entrycache"

    def test_cache_dir_resolved_by_platform(self):
        assert DEFAULT_CACHE_DIR is None

    def test_default_suffix(self):
        assert DEFAULT_ENTRY_SUFFIX == ".html"

    def test_default_viewer_is_system_browser(self):
        assert DEFAULT_VIEWER is None

    def test_default_log_level(self):
        assert DEFAULT_LOG_LEVEL == "WARNING"

    def test_get_defaults_keys(self):
        defaults = get_defaults()
        assert set(defaults) == {"app_name", "cache_dir", "entry_suffix", "viewer", "log_level"}

    def test_get_defaults_returns_copy(self):
        d1 = get_defaults()
        d1["app_name"] = "changed"
        assert get_defaults()["app_name"] == "entrycache"
