"""Command-line entry point listing launcher entries with their icons"""

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional, TextIO

from .config.environment import load_search_config
from .config.schema import SearchConfig
from .core.desktop_file import DesktopFile, DesktopFileError, parse_desktop_file
from .core.discovery import get_desktop_files
from .core.icons import Icon
from .core.rasterizer import InvalidIconDataError
from .logging_config import setup_logging, get_logger
from . import __version__

logger = get_logger("app")

APP_LIMIT = 50
ICON_SIZE = 128


class LauncherIconsApp:
    """Discover desktop entries and turn their icons into displayable files.

    Handles the whole pipeline for a capped number of entries; layout and
    display are left to whoever reads the output.
    """

    def __init__(self, config: SearchConfig, limit: int = APP_LIMIT, size: int = ICON_SIZE):
        self.config = config
        self.limit = limit
        self.size = size

    def load_entries(self) -> list[DesktopFile]:
        """Parse discovered desktop files, skipping unreadable ones.

        Returns:
            Up to ``limit`` parsed entries, in discovery order
        """
        entries = []
        for path in get_desktop_files(self.config):
            if len(entries) >= self.limit:
                break
            try:
                entries.append(parse_desktop_file(path))
            except DesktopFileError as e:
                logger.warning(f"Skipping {path}: {e}")
        return entries

    def build_icons(self, entry: DesktopFile) -> list[Icon]:
        """Resolve and process every icon candidate of one entry.

        A candidate that fails to rasterize is logged and left out; the
        others are still returned.
        """
        icons = []
        for raw_icon in entry.get_raw_icons(self.config):
            try:
                icons.append(raw_icon.process(self.size, self.config.cache_dir))
            except (OSError, InvalidIconDataError) as e:
                logger.warning(f"Could not process icon {raw_icon.path} for {entry.path}: {e}")
        return icons

    def run(self, out: TextIO = sys.stdout) -> int:
        """Run the pipeline and print one line per entry.

        Each line is tab-separated: display name, command, and the icon
        paths joined with ';'.

        Returns:
            Number of entries printed
        """
        entries = self.load_entries()
        logger.info(f"Loaded {len(entries)} desktop entries")

        for entry in entries:
            icons = self.build_icons(entry)
            icon_paths = ";".join(str(icon.path) for icon in icons)
            out.write(f"{entry.display_name}\t{entry.command or ''}\t{icon_paths}\n")

        return len(entries)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="launcher-icons",
        description="List desktop entries and their resolved icons.",
    )
    parser.add_argument("--limit", type=int, default=APP_LIMIT,
                        help=f"maximum number of entries (default: {APP_LIMIT})")
    parser.add_argument("--size", type=int, default=ICON_SIZE,
                        help=f"pixel size for rasterized SVG icons (default: {ICON_SIZE})")
    parser.add_argument("--cache-dir", type=Path, default=None,
                        help="directory for rasterized icons")
    parser.add_argument("--debug", action="store_true",
                        help="also log to the console")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    """Application entry point."""
    args = parse_args(argv)

    # Initialize logging first
    root_logger = setup_logging(debug=args.debug)
    root_logger.info(f"Starting Launcher Icons v{__version__}")

    exit_code = 0
    try:
        config = load_search_config()
        if args.cache_dir is not None:
            config = replace(config, cache_dir=args.cache_dir)
        logger.debug(
            f"Theme {config.icon_theme}, theme search "
            f"{'enabled' if config.icon_data_dirs is not None else 'disabled'}, "
            f"cache {config.cache_dir}"
        )
        app = LauncherIconsApp(config, limit=args.limit, size=args.size)
        app.run()
    except Exception as e:
        root_logger.exception("Fatal error")
        print(f"launcher-icons: {e}", file=sys.stderr)
        exit_code = 1
    finally:
        root_logger.info("Launcher Icons shutting down")

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
