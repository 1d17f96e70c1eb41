"""Tests for direct-path and icon theme resolution"""

from pathlib import Path

from launcher_icons.core.desktop_file import DesktopFile
from launcher_icons.core.icon_resolver import IconResolver, resolve_raw_icons
from launcher_icons.core.icons import RawIcon, RawIconKind

from .conftest import add_theme_icon


class TestDirectPath:

    def test_existing_direct_path_short_circuits_theme(self, tmp_path, make_config, icon_root):
        # The desktop file path is used as the join base
        base = tmp_path / "entry"
        base.mkdir()
        (base / "app.png").write_bytes(b"")
        add_theme_icon(icon_root, "128x128", "app.png")
        add_theme_icon(icon_root, "scalable", "app.png")
        entry = DesktopFile(path=base, icon="app.png")

        icons = IconResolver(make_config(icon_data_dirs=(icon_root,))).resolve(entry)

        assert icons == [RawIcon(RawIconKind.PNG, base / "app.png")]

    def test_absolute_icon_path(self, tmp_path, make_config):
        icon = tmp_path / "logo.svg"
        icon.write_text("<svg/>")
        entry = DesktopFile(path=Path("/usr/share/applications/app.desktop"), icon=str(icon))

        assert IconResolver(make_config()).resolve(entry) == [RawIcon(RawIconKind.SVG, icon)]

    def test_unrecognized_direct_path_gives_empty(self, tmp_path, make_config, icon_root):
        icon = tmp_path / "logo.xpm"
        icon.write_bytes(b"")
        add_theme_icon(icon_root, "128x128", "logo.png")
        entry = DesktopFile(path=tmp_path / "app.desktop", icon=str(icon))

        assert IconResolver(make_config(icon_data_dirs=(icon_root,))).resolve(entry) == []

    def test_sibling_of_desktop_file_is_not_direct(self, tmp_path, make_config, icon_root):
        # Joining onto the file path means an icon next to the desktop
        # file is not found directly; lookup falls through to the theme.
        apps = tmp_path / "applications"
        apps.mkdir()
        desktop = apps / "app.desktop"
        desktop.write_text("Icon=app.png\n")
        (apps / "app.png").write_bytes(b"")
        themed = add_theme_icon(icon_root, "64x64", "app.png.png")
        entry = DesktopFile(path=desktop, icon="app.png")

        icons = IconResolver(make_config(icon_data_dirs=(icon_root,))).resolve(entry)

        assert icons == [RawIcon(RawIconKind.PNG, themed)]


class TestThemeSearch:

    def test_no_icon_field(self, make_config, icon_root):
        add_theme_icon(icon_root, "128x128", "app.png")
        entry = DesktopFile(path=Path("/x/app.desktop"), name="App")

        assert IconResolver(make_config(icon_data_dirs=(icon_root,))).resolve(entry) == []

    def test_theme_search_disabled_without_icon_dirs(self, make_config, icon_root):
        add_theme_icon(icon_root, "128x128", "app.png")
        entry = DesktopFile(path=Path("/x/app.desktop"), icon="app")

        assert IconResolver(make_config(icon_data_dirs=None)).resolve(entry) == []

    def test_size_bucket_priority_order(self, make_config, icon_root):
        small = add_theme_icon(icon_root, "32x32", "app.png")
        scalable = add_theme_icon(icon_root, "scalable", "app.svg")
        large = add_theme_icon(icon_root, "128x128", "app.png")
        huge = add_theme_icon(icon_root, "256x256", "app.png")
        entry = DesktopFile(path=Path("/x/app.desktop"), icon="app")

        icons = IconResolver(make_config(icon_data_dirs=(icon_root,))).resolve(entry)

        assert icons == [
            RawIcon(RawIconKind.PNG, large),
            RawIcon(RawIconKind.SVG, scalable),
            RawIcon(RawIconKind.PNG, huge),
            RawIcon(RawIconKind.PNG, small),
        ]

    def test_roots_before_sizes(self, tmp_path, make_config):
        first = tmp_path / "first"
        second = tmp_path / "second"
        first_small = add_theme_icon(first, "32x32", "app.png")
        second_large = add_theme_icon(second, "128x128", "app.png")
        entry = DesktopFile(path=Path("/x/app.desktop"), icon="app")

        icons = IconResolver(make_config(icon_data_dirs=(first, second))).resolve(entry)

        assert [icon.path for icon in icons] == [first_small, second_large]

    def test_multiple_formats_in_one_bucket(self, make_config, icon_root):
        png = add_theme_icon(icon_root, "128x128", "app.png")
        glb = add_theme_icon(icon_root, "128x128", "app.glb")
        entry = DesktopFile(path=Path("/x/app.desktop"), icon="app")

        icons = IconResolver(make_config(icon_data_dirs=(icon_root,))).resolve(entry)

        assert icons == [RawIcon(RawIconKind.GLTF, glb), RawIcon(RawIconKind.PNG, png)]

    def test_stem_must_match_exactly(self, make_config, icon_root):
        add_theme_icon(icon_root, "128x128", "app-beta.png")
        add_theme_icon(icon_root, "128x128", "App.png")
        add_theme_icon(icon_root, "128x128", "app.xpm")
        exact = add_theme_icon(icon_root, "128x128", "app.png")
        entry = DesktopFile(path=Path("/x/app.desktop"), icon="app")

        icons = IconResolver(make_config(icon_data_dirs=(icon_root,))).resolve(entry)

        assert icons == [RawIcon(RawIconKind.PNG, exact)]

    def test_uses_configured_theme(self, make_config, icon_root):
        add_theme_icon(icon_root, "128x128", "app.png")
        themed = add_theme_icon(icon_root, "128x128", "app.png", theme="Papirus")
        entry = DesktopFile(path=Path("/x/app.desktop"), icon="app")

        config = make_config(icon_data_dirs=(icon_root,), icon_theme="Papirus")

        assert IconResolver(config).resolve(entry) == [RawIcon(RawIconKind.PNG, themed)]

    def test_missing_directories_are_skipped(self, tmp_path, make_config):
        entry = DesktopFile(path=Path("/x/app.desktop"), icon="app")
        config = make_config(icon_data_dirs=(tmp_path / "nope", Path("")))

        assert IconResolver(config).resolve(entry) == []

    def test_resolve_raw_icons_reads_environment(self, monkeypatch, icon_root):
        found = add_theme_icon(icon_root, "scalable", "app.svg")
        monkeypatch.setenv("XDG_DATA_DIRS", str(icon_root))
        monkeypatch.delenv("XDG_ICON_THEME", raising=False)
        entry = DesktopFile(path=Path("/x/app.desktop"), icon="app")

        assert resolve_raw_icons(entry) == [RawIcon(RawIconKind.SVG, found)]

    def test_get_raw_icons_without_data_dirs_env(self, monkeypatch, icon_root):
        add_theme_icon(icon_root, "scalable", "app.svg")
        monkeypatch.delenv("XDG_DATA_DIRS", raising=False)
        entry = DesktopFile(path=Path("/x/app.desktop"), icon="app")

        assert entry.get_raw_icons() == []
