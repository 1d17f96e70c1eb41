"""Locate .desktop files in the XDG application directories"""

import os
from pathlib import Path
from typing import Optional

from ..config.environment import load_search_config
from ..config.paths import XdgPaths
from ..config.schema import SearchConfig
from ..logging_config import get_logger

logger = get_logger("discovery")


def get_desktop_files(config: Optional[SearchConfig] = None) -> list[Path]:
    """Collect desktop files from every application directory.

    Searched roots are each data dir's "applications" subdirectory followed
    by ~/.local/share/applications. Roots that are missing or not
    directories are skipped. Subdirectories and symlinks are followed.

    The order depends on the filesystem. Callers that only show the first
    N entries will see a platform-dependent subset.

    Args:
        config: Search configuration, read from the environment if None

    Returns:
        Paths of regular files with a ".desktop" suffix
    """
    if config is None:
        config = load_search_config()

    desktop_files = []
    for root in config.application_dirs():
        if not root.is_dir():
            logger.debug(f"Skipping missing application dir {root}")
            continue
        found = _walk_desktop_files(root.absolute())
        logger.debug(f"Found {len(found)} desktop files in {root}")
        desktop_files.extend(found)

    return desktop_files


def _walk_desktop_files(root: Path) -> list[Path]:
    """Recursively collect desktop files below root, following symlinks.

    A directory reached again through a symlink (same real path) is not
    walked twice, which also stops symlink loops.
    """
    found = []
    visited: set[str] = set()

    for dirpath, dirnames, filenames in os.walk(root, followlinks=True):
        real = os.path.realpath(dirpath)
        if real in visited:
            dirnames[:] = []
            continue
        visited.add(real)

        for filename in filenames:
            path = Path(dirpath) / filename
            if path.suffix == XdgPaths.DESKTOP_EXTENSION and path.is_file():
                found.append(path)

    return found
