"""Find icon files for a desktop entry.

Lookup order:
    1. The Icon value joined onto the desktop file path. If that exists the
       theme is not searched, and an unrecognized extension gives no result.
    2. The configured icon theme: every <root>/icons/<theme>/<size>/apps
       directory, root-major, size-minor, matching files by stem.

Missing icons are a normal outcome, so nothing here raises. Dead ends are
logged at debug level and produce an empty or partial list.
"""

from pathlib import Path
from typing import Optional

from ..config.environment import load_search_config
from ..config.schema import SearchConfig
from ..logging_config import get_logger
from .icons import RawIcon

logger = get_logger("icon_resolver")


class IconResolver:
    """Resolve a desktop entry's Icon field into candidate icon files.

    Directory listings are not cached; each call reads the theme
    directories again.
    """

    def __init__(self, config: SearchConfig):
        self.config = config

    def resolve(self, desktop_file) -> list[RawIcon]:
        """Get all candidate icons for a desktop entry.

        Args:
            desktop_file: Anything with ``path`` and ``icon`` attributes,
                normally a DesktopFile

        Returns:
            Candidates in priority order, possibly empty. Callers choose
            between several formats of the same icon themselves.
        """
        icon_name = desktop_file.icon
        if icon_name is None:
            return []

        # The desktop file path itself is the join base, not its parent
        direct = Path(desktop_file.path) / icon_name
        if self._exists(direct):
            return self._resolve_direct(direct)

        return self.search_theme(icon_name)

    @staticmethod
    def _exists(path: Path) -> bool:
        try:
            return path.exists()
        except (OSError, ValueError):
            # Unreadable parent or a NUL in the icon name
            return False

    def _resolve_direct(self, path: Path) -> list[RawIcon]:
        icon = RawIcon.from_path(path)
        if icon is None:
            logger.debug(f"Direct icon path {path} has an unrecognized extension")
            return []
        return [icon]

    def search_theme(self, icon_name: str) -> list[RawIcon]:
        """Search the configured icon theme for files named icon_name.

        Args:
            icon_name: Icon name compared against file stems

        Returns:
            Recognized icon files from every size bucket of every root
        """
        if self.config.icon_data_dirs is None:
            logger.debug(f"No icon data dirs configured, skipping theme search for {icon_name}")
            return []

        icons = []
        for icon_dir in self.config.theme_icon_dirs():
            for path in self._matching_files(icon_dir, icon_name):
                icon = RawIcon.from_path(path)
                if icon is not None:
                    icons.append(icon)

        logger.debug(f"Theme {self.config.icon_theme}: {len(icons)} candidates for {icon_name}")
        return icons

    @staticmethod
    def _matching_files(directory: Path, icon_name: str) -> list[Path]:
        """List entries of directory whose stem equals icon_name.

        Returns:
            Matching paths sorted by name, or an empty list if the
            directory cannot be read
        """
        try:
            entries = sorted(directory.iterdir())
        except OSError:
            return []
        return [entry for entry in entries if entry.stem == icon_name]


def resolve_raw_icons(desktop_file, config: Optional[SearchConfig] = None) -> list[RawIcon]:
    """Convenience wrapper building an IconResolver for one lookup.

    Args:
        desktop_file: Entry with ``path`` and ``icon`` attributes
        config: Search configuration, read from the environment if None

    Returns:
        Candidate icons in priority order
    """
    if config is None:
        config = load_search_config()
    return IconResolver(config).resolve(desktop_file)
