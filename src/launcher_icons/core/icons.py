"""Icon asset kinds and the conversion from found files to displayable icons.

A RawIcon is a file found on disk and tagged by extension. An Icon is what a
launcher can show directly: a PNG or a glTF scene. SVG candidates become PNG
icons by rasterizing them into the cache directory.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from .rasterizer import render_svg_to_png


class RawIconKind(Enum):
    """Kinds of icon files found on disk"""
    PNG = "png"    # raster image
    SVG = "svg"    # vector image
    GLTF = "gltf"  # 3D scene (.glb or .gltf)


class IconKind(Enum):
    """Kinds of icons ready for display"""
    PNG = "png"
    GLTF = "gltf"


# Exact, case-sensitive suffix match
EXTENSION_KINDS = {
    ".png": RawIconKind.PNG,
    ".svg": RawIconKind.SVG,
    ".glb": RawIconKind.GLTF,
    ".gltf": RawIconKind.GLTF,
}


@dataclass(frozen=True)
class Icon:
    """A displayable icon file"""
    kind: IconKind
    path: Path


@dataclass(frozen=True)
class RawIcon:
    """An icon file found on disk, before any format conversion"""
    kind: RawIconKind
    path: Path

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> Optional["RawIcon"]:
        """Classify a file by its extension.

        No filesystem access is made.

        Args:
            path: Candidate icon file

        Returns:
            RawIcon for .png, .svg, .glb and .gltf files, None otherwise
        """
        path = Path(path)
        kind = EXTENSION_KINDS.get(path.suffix)
        if kind is None:
            return None
        return cls(kind=kind, path=path)

    def process(self, size: int, cache_dir: Union[str, Path]) -> Icon:
        """Turn this candidate into a displayable icon.

        Args:
            size: Pixel size used when an SVG has to be rasterized
            cache_dir: Where rasterized PNGs are written

        Returns:
            Icon pointing at the original file, or at the rendered PNG for SVGs

        Raises:
            OSError, InvalidIconDataError: If rasterizing an SVG fails
        """
        if self.kind is RawIconKind.PNG:
            return Icon(IconKind.PNG, self.path)
        if self.kind is RawIconKind.SVG:
            return Icon(IconKind.PNG, render_svg_to_png(cache_dir, self.path, size))
        return Icon(IconKind.GLTF, self.path)
