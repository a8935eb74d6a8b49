"""Configuration — package defaults and the layered config hierarchy."""

from entrycache.config.defaults import get_defaults
from entrycache.config.hierarchy import load_config_hierarchy

__all__ = ["get_defaults", "load_config_hierarchy"]
