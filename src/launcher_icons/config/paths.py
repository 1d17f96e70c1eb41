"""Default XDG locations used for discovery, icon lookup and caching"""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Optional


class XdgPaths:
    """Default paths and names from the freedesktop base directory conventions.

    Values here are fixed defaults. Anything taken from the environment is
    read by config.environment and carried in a SearchConfig.
    """

    # Used for desktop file discovery when XDG_DATA_DIRS is unset
    DEFAULT_DATA_DIRS = "/usr/local/share:/usr/share"

    # Icon theme used when XDG_ICON_THEME is unset
    DEFAULT_ICON_THEME = "hicolor"

    # Size buckets searched inside a theme, highest priority first
    ICON_SIZES = ("128x128", "scalable", "256x256", "64x64", "32x32")

    APPLICATIONS_DIR_NAME = "applications"
    DESKTOP_EXTENSION = ".desktop"

    # User applications, relative to the home directory
    LOCAL_APPLICATIONS = Path(".local") / "share" / "applications"

    # Cache locations
    DEFAULT_CACHE_HOME = Path(".cache")  # relative to the home directory
    CACHE_DIR_NAME = "launcher_icons"
    RASTER_DIR_NAME = "icons"
    LOG_FILE_NAME = "launcher_icons.log"

    @classmethod
    def split_search_path(cls, value: str) -> list[Path]:
        """Split a colon-separated search path into paths.

        Empty segments are kept as-is, matching how the variable is read
        by other XDG consumers.

        Args:
            value: Search path string such as "/usr/local/share:/usr/share"

        Returns:
            List of Path objects in the original order
        """
        return [Path(entry) for entry in value.split(":")]

    @classmethod
    def cache_root(cls, environ: Optional[Mapping[str, str]] = None) -> Path:
        """Get the application cache directory.

        Args:
            environ: Environment mapping, defaults to os.environ

        Returns:
            $XDG_CACHE_HOME/launcher_icons, or ~/.cache/launcher_icons
        """
        if environ is None:
            environ = os.environ
        cache_home = environ.get("XDG_CACHE_HOME")
        base = Path(cache_home) if cache_home else Path.home() / cls.DEFAULT_CACHE_HOME
        return base / cls.CACHE_DIR_NAME

    @classmethod
    def ensure_dir(cls, path: Path) -> Path:
        """Ensure a directory exists.

        Args:
            path: Directory to create if missing

        Returns:
            The same path
        """
        path.mkdir(parents=True, exist_ok=True)
        return path
