"""Configuration data models"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .paths import XdgPaths


@dataclass(frozen=True)
class SearchConfig:
    """Everything discovery, icon lookup and rasterization read from the outside.

    Built once at the program boundary (see config.environment) and passed
    down explicitly, so tests can construct one directly.
    """
    # Roots whose "applications" subdirectories hold desktop files
    data_dirs: tuple[Path, ...] = field(
        default_factory=lambda: tuple(XdgPaths.split_search_path(XdgPaths.DEFAULT_DATA_DIRS))
    )
    home_dir: Path = field(default_factory=Path.home)
    icon_theme: str = XdgPaths.DEFAULT_ICON_THEME
    # Roots for icon themes; None disables theme search entirely
    icon_data_dirs: Optional[tuple[Path, ...]] = None
    icon_sizes: tuple[str, ...] = XdgPaths.ICON_SIZES
    cache_dir: Path = field(
        default_factory=lambda: XdgPaths.cache_root() / XdgPaths.RASTER_DIR_NAME
    )

    @property
    def local_applications_dir(self) -> Path:
        """The user's own applications directory."""
        return self.home_dir / XdgPaths.LOCAL_APPLICATIONS

    def application_dirs(self) -> list[Path]:
        """Get the ordered list of roots searched for desktop files.

        Returns:
            Each data dir joined with "applications", then the local dir
        """
        dirs = [d / XdgPaths.APPLICATIONS_DIR_NAME for d in self.data_dirs]
        dirs.append(self.local_applications_dir)
        return dirs

    def theme_icon_dirs(self) -> list[Path]:
        """Get the ordered list of theme directories searched for icons.

        Root-major, size-bucket-minor: every bucket of the first root comes
        before any bucket of the second.

        Returns:
            List of root/icons/<theme>/<size>/apps paths, empty when
            icon_data_dirs is None
        """
        if self.icon_data_dirs is None:
            return []
        return [
            root / "icons" / self.icon_theme / size / "apps"
            for root in self.icon_data_dirs
            for size in self.icon_sizes
        ]
