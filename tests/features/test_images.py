"""Tests for image-property previews."""

import struct

import pytest

from kvlens.features import image_dimensions, image_info, resolve_image_path


def _png(width, height):
    ihdr = struct.pack(">II", width, height) + b"\x08\x06\x00\x00\x00"
    return b"\x89PNG\r\n\x1a\n" + b"\x00\x00\x00\x0dIHDR" + ihdr + b"\x00\x00\x00\x00"


def _jpeg(width, height):
    app0 = b"\xff\xe0" + struct.pack(">H", 4) + b"\x00\x00"
    sof0 = b"\xff\xc0" + struct.pack(">H", 17) + b"\x08" + struct.pack(">HH", height, width)
    return b"\xff\xd8" + app0 + sof0 + b"\x00" * 12


@pytest.fixture
def project(tmp_path):
    """Workspace with a ui/ directory holding the .kv file."""
    kv_dir = tmp_path / "ui"
    kv_dir.mkdir()
    kv_path = kv_dir / "main.kv"
    kv_path.write_text("Image:\n    source: 'logo.png'\n")
    return tmp_path, kv_path


class TestImageInfo:
    def test_relative_to_kv_file(self, project):
        root, kv_path = project
        (kv_path.parent / "logo.png").write_bytes(_png(32, 16))

        info = image_info("    source: 'logo.png'", kv_path=kv_path)

        assert info.property_name == "source"
        assert info.image_path == "logo.png"
        assert info.resolved_path == kv_path.parent / "logo.png"
        assert (info.width, info.height) == (32, 16)
        assert info.size_bytes == len(_png(32, 16))

    def test_background_properties(self, project):
        root, kv_path = project
        (root / "button.jpg").write_bytes(_jpeg(64, 48))

        info = image_info('    background_down: "button.jpg"', kv_path=kv_path, workspace_root=root)

        assert info.property_name == "background_down"
        assert info.resolved_path == root / "button.jpg"
        assert (info.width, info.height) == (64, 48)

    def test_not_an_image_line(self, project):
        root, kv_path = project
        (root / "logo.png").write_bytes(_png(1, 1))

        assert image_info("    text: 'logo.png'", kv_path=kv_path, workspace_root=root) is None
        assert image_info("    source: 'notes.txt'", kv_path=kv_path, workspace_root=root) is None

    def test_missing_file(self, project):
        root, kv_path = project

        assert image_info("    source: 'ghost.png'", kv_path=kv_path, workspace_root=root) is None

    def test_format_without_dimensions(self, project):
        root, kv_path = project
        (root / "icon.svg").write_text("<svg/>")

        info = image_info("source: icon.svg", workspace_root=root)

        assert info.width is None
        assert "**File:** `icon.svg`\n" in info.to_markdown()

    def test_markdown(self, project):
        root, kv_path = project
        (kv_path.parent / "logo.png").write_bytes(b"\x00" * 1024)

        info = image_info("    source: 'logo.png'", kv_path=kv_path)
        markdown = info.to_markdown()

        assert markdown.startswith("![logo.png](file://")
        assert "**Path:** `logo.png`" in markdown
        assert markdown.endswith("**Size:** 1.00 KB")


class TestResolveImagePath:
    def test_absolute_path(self, tmp_path):
        image = tmp_path / "abs.png"
        image.write_bytes(_png(2, 2))

        assert resolve_image_path(str(image)) == image
        assert resolve_image_path(str(tmp_path / "missing.png")) is None

    def test_kv_dir_before_workspace_root(self, project):
        root, kv_path = project
        (root / "logo.png").write_bytes(_png(1, 1))
        (kv_path.parent / "logo.png").write_bytes(_png(2, 2))

        assert resolve_image_path("logo.png", kv_path.parent, root) == kv_path.parent / "logo.png"

    def test_common_directories(self, project):
        root, kv_path = project
        (root / "assets").mkdir()
        (root / "assets" / "bg.png").write_bytes(_png(1, 1))
        (kv_path.parent / "images").mkdir()
        (kv_path.parent / "images" / "icon.png").write_bytes(_png(1, 1))

        assert resolve_image_path("bg.png", kv_path.parent, root) == root / "assets" / "bg.png"
        assert resolve_image_path("icon.png", kv_path.parent, root) == (
            kv_path.parent / "images" / "icon.png"
        )

    def test_workspace_dir_wins_over_kv_dir_for_same_folder(self, project):
        root, kv_path = project
        for base in (root, kv_path.parent):
            (base / "img").mkdir()
            (base / "img" / "x.png").write_bytes(_png(1, 1))

        assert resolve_image_path("x.png", kv_path.parent, root) == root / "img" / "x.png"


class TestImageDimensions:
    def test_truncated_png(self, tmp_path):
        path = tmp_path / "short.png"
        path.write_bytes(b"\x89PNG\r\n\x1a\n")

        assert image_dimensions(path) is None

    def test_truncated_jpeg(self, tmp_path):
        path = tmp_path / "short.jpg"
        path.write_bytes(b"\xff\xd8\xff\xc0\x00\x11")

        assert image_dimensions(path) is None

    def test_other_format(self, tmp_path):
        path = tmp_path / "a.gif"
        path.write_bytes(b"GIF89a")

        assert image_dimensions(path) is None


def test_service_image_info(service, project):
    root, kv_path = project
    (kv_path.parent / "logo.png").write_bytes(_png(8, 4))

    info = service.image_info(kv_path.read_text(), 1, kv_path=kv_path)

    assert (info.width, info.height) == (8, 4)
    assert service.image_info(kv_path.read_text(), 0, kv_path=kv_path) is None
    assert service.image_info(kv_path.read_text(), 99, kv_path=kv_path) is None
