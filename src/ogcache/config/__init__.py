"""Configuration — package defaults merged with YAML, env and runtime layers."""

from ogcache.config.hierarchy import load_config_hierarchy

__all__ = ["load_config_hierarchy"]
