"""Launcher Icons - Desktop entry discovery and icon resolution for app launchers.

This package provides:
    - Discovery of .desktop files across the XDG data directories
    - Parsing of desktop entries into DesktopFile records
    - Icon lookup by direct path or through a freedesktop-style icon theme
    - Rasterization of SVG icons to fixed-size PNG files

Package Structure:
    app: Command-line entry point listing entries with their resolved icons
    config: Default XDG paths, the SearchConfig model and environment loading
    core: Discovery, desktop file parsing, icon classification, resolution
        and rasterization

Quick Start:
    Run from command line::

        python -m launcher_icons --limit 20 --size 128

    Or programmatically::

        from launcher_icons.core import get_desktop_files, parse_desktop_file

        for path in get_desktop_files():
            entry = parse_desktop_file(path)
            icons = entry.get_raw_icons()

Environment:
    - XDG_DATA_DIRS: Roots for applications and icon themes
    - XDG_ICON_THEME: Icon theme name (default: hicolor)
    - XDG_CACHE_HOME: Rasterized icons and log file location (default: ~/.cache)
"""

__version__ = "0.3.0"
__app_name__ = "Launcher Icons"
