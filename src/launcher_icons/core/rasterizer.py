"""Render SVG icons to fixed-size PNG files.

The SVG is drawn with cairosvg, scaled to fit the target width with its
aspect ratio kept, then placed at the top-left corner of a transparent
square Pillow canvas and written out as PNG. Output is named after the
source file, so rendering the same icon twice overwrites the same file.
"""

import io
from pathlib import Path
from typing import Union

import cairosvg
from PIL import Image

from ..config.paths import XdgPaths
from ..logging_config import get_logger

logger = get_logger("rasterizer")

PathLike = Union[str, Path]


class InvalidIconDataError(ValueError):
    """Raised when an icon file cannot be decoded as an image."""


def render_svg_to_png(cache_dir: PathLike, svg_path: PathLike, size: int) -> Path:
    """Rasterize an SVG file into a size x size PNG inside cache_dir.

    Args:
        cache_dir: Output directory, created (with parents) if missing
        svg_path: Source SVG file
        size: Width and height of the output image in pixels

    Returns:
        Path to the written PNG (cache_dir / <svg stem>.png)

    Raises:
        OSError: If the source cannot be resolved or read, or the PNG
            cannot be written
        InvalidIconDataError: If the source is not valid SVG
    """
    svg_path = Path(svg_path).resolve(strict=True)
    svg_data = svg_path.read_bytes()
    if not svg_data.strip():
        raise InvalidIconDataError(f"Empty SVG file {svg_path}")

    try:
        rendered = cairosvg.svg2png(bytestring=svg_data, output_width=size)
    except (SyntaxError, ValueError) as e:
        # xml ParseError is a SyntaxError subclass
        raise InvalidIconDataError(f"Invalid SVG data in {svg_path}: {e}") from e

    cache_dir = XdgPaths.ensure_dir(Path(cache_dir))
    png_path = (cache_dir / svg_path.name).with_suffix(".png")

    with Image.open(io.BytesIO(rendered)) as image:
        canvas = Image.new("RGBA", (size, size), (0, 0, 0, 0))
        canvas.paste(image.convert("RGBA"), (0, 0))

    canvas.save(png_path, format="PNG")
    logger.debug(f"Rendered {svg_path} -> {png_path} ({size}x{size})")
    return png_path
