"""Parser for freedesktop .desktop entry files.

Only the keys a launcher needs are read:
- Name: display name
- Exec: command line
- Categories: ';'-separated list, empty segments dropped
- Icon: icon name or path fragment

Every key=value line is considered regardless of which [section] it sits
in, and a repeated key overwrites the earlier value.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from ..config.schema import SearchConfig
from ..logging_config import get_logger
from .icon_resolver import resolve_raw_icons
from .icons import RawIcon

logger = get_logger("desktop_file")


class DesktopFileError(Exception):
    """Raised when a desktop file cannot be opened or read."""


@dataclass(frozen=True)
class DesktopFile:
    """A parsed desktop entry."""
    path: Path  # File it was parsed from, as given by the caller
    name: Optional[str] = None
    command: Optional[str] = None
    categories: tuple[str, ...] = ()
    icon: Optional[str] = None

    @property
    def display_name(self) -> str:
        """Name to show, falling back to the file stem."""
        return self.name if self.name is not None else Path(self.path).stem

    def get_raw_icons(self, config: Optional[SearchConfig] = None) -> list[RawIcon]:
        """Find candidate icon files for this entry.

        Args:
            config: Search configuration, read from the environment if None

        Returns:
            Candidate icons in priority order, empty if none were found
        """
        return resolve_raw_icons(self, config)


def parse_desktop_file(path: Union[str, Path]) -> DesktopFile:
    """Parse a desktop file.

    Args:
        path: Path to the .desktop file

    Returns:
        DesktopFile with the recognized fields

    Raises:
        DesktopFileError: If the file cannot be opened or a line cannot be
            decoded
    """
    path = Path(path)
    name = None
    command = None
    categories: tuple[str, ...] = ()
    icon = None

    try:
        f = open(path, "r", encoding="utf-8", newline="\n")
    except OSError as e:
        raise DesktopFileError(f"Failed to open file: {e}") from e

    with f:
        while True:
            try:
                line = f.readline()
            except (UnicodeDecodeError, OSError) as e:
                raise DesktopFileError(f"Failed to read line: {e}") from e
            if not line:
                break

            # Lines end at "\n" only; "\r" is dropped just before it
            if line.endswith("\n"):
                line = line[:-1].removesuffix("\r")

            # Skip blank lines and comments
            if not line or line.startswith("#"):
                continue

            key, sep, value = line.partition("=")
            if not sep:
                continue

            if key == "Name":
                name = value
            elif key == "Exec":
                command = value
            elif key == "Categories":
                categories = tuple(c for c in value.split(";") if c)
            elif key == "Icon":
                icon = value

    logger.debug(f"Parsed {path}: name={name!r}, icon={icon!r}")
    return DesktopFile(
        path=path,
        name=name,
        command=command,
        categories=categories,
        icon=icon,
    )
