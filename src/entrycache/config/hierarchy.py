"""Configuration hierarchy — merges sources in priority order.

Precedence (later overrides earlier):
  1. Package defaults
  2. Global config   (<user config dir>/entrycache/config.yaml)
  3. Project config   (./entrycache.yaml, searched upward)
  4. Environment variables (ENTRYCACHE_*)
  5. Runtime arguments
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import platformdirs
import yaml

from entrycache.config.defaults import DEFAULT_APP_NAME, get_defaults

logger = logging.getLogger(__name__)

_PROJECT_CONFIG_NAME = "entrycache.yaml"

# Map of environment variables to config keys
_ENV_MAP: dict[str, str] = {
    "ENTRYCACHE_APP_NAME": "app_name",
    "ENTRYCACHE_CACHE_DIR": "cache_dir",
    "ENTRYCACHE_ENTRY_SUFFIX": "entry_suffix",
    "ENTRYCACHE_VIEWER": "viewer",
    "ENTRYCACHE_LOG_LEVEL": "log_level",
}


def load_config_hierarchy(**runtime_overrides: Any) -> dict[str, Any]:
    """Load and merge configuration from all sources.

    Returns a merged dict with the final resolved values.
    """
    config = get_defaults()

    # Layer 2: Global config
    global_cfg = _load_yaml_config(_global_config_path())
    if global_cfg:
        config.update(global_cfg)

    # Layer 3: Project config (search from cwd upward)
    project_path = _find_project_config()
    if project_path:
        project_cfg = _load_yaml_config(project_path)
        if project_cfg:
            config.update(project_cfg)

    # Layer 4: Environment variables
    config.update(_load_env_vars())

    # Layer 5: Runtime arguments (highest priority)
    for key, value in runtime_overrides.items():
        if value is not None:
            config[key] = value

    if config.get("cache_dir") is not None:
        config["cache_dir"] = Path(config["cache_dir"]).expanduser()

    return config


def _global_config_path() -> Path:
    return platformdirs.user_config_path(DEFAULT_APP_NAME, appauthor=False) / "config.yaml"


def _load_yaml_config(path: Path) -> dict[str, Any] | None:
    """Load a YAML config file if it exists."""
    if not path.exists() or not path.is_file():
        return None
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
        if isinstance(data, dict):
            return data
        logger.warning("Config file %s is not a mapping, ignoring", path)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Failed to load config %s: %s", path, e)
    return None


def _find_project_config() -> Path | None:
    """Search for entrycache.yaml from cwd upward."""
    cwd = Path.cwd()
    for parent in [cwd, *cwd.parents]:
        candidate = parent / _PROJECT_CONFIG_NAME
        if candidate.exists():
            return candidate
    return None


def _load_env_vars() -> dict[str, Any]:
    """Read ENTRYCACHE_* environment variables."""
    result: dict[str, Any] = {}
    for env_key, config_key in _ENV_MAP.items():
        value = os.environ.get(env_key)
        if value is None or value == "":
            continue
        result[config_key] = value
    return result

