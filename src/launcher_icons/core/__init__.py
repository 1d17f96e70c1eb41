"""Core lookup logic.

This module contains desktop file discovery and parsing, and icon resolution.

Submodules:
    discovery: get_desktop_files() walking the XDG application directories
    desktop_file: DesktopFile and parse_desktop_file() for .desktop entries
    icons: RawIcon/Icon tagged values, extension classification and processing
    icon_resolver: IconResolver for direct-path and icon theme lookups
    rasterizer: render_svg_to_png() producing fixed-size PNGs from SVGs

Typical flow: discovery -> desktop_file -> icon_resolver -> icons -> rasterizer.
"""

from .desktop_file import DesktopFile, DesktopFileError, parse_desktop_file
from .discovery import get_desktop_files
from .icon_resolver import IconResolver, resolve_raw_icons
from .icons import Icon, IconKind, RawIcon, RawIconKind
from .rasterizer import InvalidIconDataError, render_svg_to_png

__all__ = [
    "DesktopFile",
    "DesktopFileError",
    "parse_desktop_file",
    "get_desktop_files",
    "IconResolver",
    "resolve_raw_icons",
    "Icon",
    "IconKind",
    "RawIcon",
    "RawIconKind",
    "InvalidIconDataError",
    "render_svg_to_png",
]
