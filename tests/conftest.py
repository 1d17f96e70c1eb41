"""Shared fixtures for launcher_icons tests"""

from pathlib import Path

import pytest

from launcher_icons.config.schema import SearchConfig

TEST_SVG = """<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
<ellipse cx="50" cy="80" rx="46" ry="19" fill="#07c"/>
<path d="M43,0c-6,25,16,22,1,52c11,3,19,0,19-22c38,18,16,63-12,64c-25,2-55-39-8-94" fill="#e34"/>
<path d="M34,41c-6,39,29,32,33,7c39,42-69,63-33-7" fill="#fc2"/>
</svg>
"""


@pytest.fixture
def svg_file(tmp_path: Path) -> Path:
    path = tmp_path / "src" / "krita.svg"
    path.parent.mkdir()
    path.write_text(TEST_SVG, encoding="utf-8")
    return path


@pytest.fixture
def icon_root(tmp_path: Path) -> Path:
    """A data dir holding an empty hicolor theme."""
    root = tmp_path / "share"
    (root / "icons" / "hicolor").mkdir(parents=True)
    return root


@pytest.fixture
def make_config(tmp_path: Path):
    """Build a SearchConfig that never touches the real home or cache."""
    def _make(**overrides) -> SearchConfig:
        values = {
            "data_dirs": (tmp_path / "share",),
            "home_dir": tmp_path / "home",
            "icon_data_dirs": None,
            "cache_dir": tmp_path / "cache",
        }
        values.update(overrides)
        return SearchConfig(**values)
    return _make


def add_theme_icon(root: Path, size: str, filename: str, theme: str = "hicolor") -> Path:
    """Create an empty icon file inside a theme size bucket."""
    apps = root / "icons" / theme / size / "apps"
    apps.mkdir(parents=True, exist_ok=True)
    path = apps / filename
    path.write_bytes(b"")
    return path
