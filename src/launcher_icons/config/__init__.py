"""Configuration module.

This module provides the default XDG locations and the explicit configuration
object threaded through discovery, icon resolution and rasterization.

Submodules:
    paths: XdgPaths with default search paths, theme, size buckets and cache names
    schema: SearchConfig data class
    environment: load_search_config() reading the process environment once

Environment variables are only read in environment.py (and for the cache
location in paths.XdgPaths.cache_root); everything else receives a SearchConfig.
"""

from .environment import load_search_config
from .paths import XdgPaths
from .schema import SearchConfig

__all__ = [
    "load_search_config",
    "SearchConfig",
    "XdgPaths",
]
