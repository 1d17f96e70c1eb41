"""Build a SearchConfig from the process environment"""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Optional

from .paths import XdgPaths
from .schema import SearchConfig


def load_search_config(
    environ: Optional[Mapping[str, str]] = None,
    home_dir: Optional[Path] = None,
) -> SearchConfig:
    """Read the XDG variables once and return an explicit configuration.

    XDG_DATA_DIRS falls back to XdgPaths.DEFAULT_DATA_DIRS for desktop file
    discovery, but icon theme search only uses it when it is actually set.

    Args:
        environ: Environment mapping, defaults to os.environ
        home_dir: Home directory override, defaults to Path.home()

    Returns:
        SearchConfig populated from the environment
    """
    if environ is None:
        environ = os.environ

    raw_data_dirs = environ.get("XDG_DATA_DIRS")
    data_dirs = XdgPaths.split_search_path(
        raw_data_dirs if raw_data_dirs is not None else XdgPaths.DEFAULT_DATA_DIRS
    )
    icon_data_dirs = (
        tuple(XdgPaths.split_search_path(raw_data_dirs))
        if raw_data_dirs is not None else None
    )

    return SearchConfig(
        data_dirs=tuple(data_dirs),
        home_dir=home_dir or Path.home(),
        icon_theme=environ.get("XDG_ICON_THEME") or XdgPaths.DEFAULT_ICON_THEME,
        icon_data_dirs=icon_data_dirs,
        cache_dir=XdgPaths.cache_root(environ) / XdgPaths.RASTER_DIR_NAME,
    )
