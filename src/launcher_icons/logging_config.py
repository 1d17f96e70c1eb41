"""Logging for the launcher_icons package.

Every module logs through a child of the "launcher_icons" logger, obtained
with get_logger(). Lookup dead ends (missing theme dirs, unrecognized icon
files) are DEBUG records, skipped desktop files and icons that fail to
rasterize are WARNINGs. The log file lives in the same cache directory as
the rasterized icons so a run leaves everything in one place.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from .config.paths import XdgPaths


def setup_logging(debug: bool = False, log_dir: Optional[Path] = None) -> logging.Logger:
    """Attach handlers to the "launcher_icons" logger.

    The file handler records everything from DEBUG up, so a plain run still
    leaves the full lookup trace behind. With debug=True the same records
    also go to stderr, keeping stdout free for the entry listing printed
    by the command-line app.

    Calling this again replaces the previous handlers instead of stacking
    them.

    Args:
        debug: Also log to stderr
        log_dir: Directory for launcher_icons.log, defaults to
            $XDG_CACHE_HOME/launcher_icons

    Returns:
        The package logger
    """
    log_dir = XdgPaths.ensure_dir(log_dir or XdgPaths.cache_root())
    log_file = log_dir / XdgPaths.LOG_FILE_NAME

    logger = logging.getLogger("launcher_icons")
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    logger.addHandler(file_handler)

    if debug:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(logging.Formatter(
            "%(levelname)s - %(name)s - %(message)s"
        ))
        logger.addHandler(console_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get the logger for one launcher_icons module.

    Args:
        name: Short module name, e.g. 'discovery' or 'icon_resolver'

    Returns:
        The "launcher_icons.<name>" logger
    """
    return logging.getLogger(f"launcher_icons.{name}")
