"""Image previews for image-path properties.

Properties such as ``source`` or ``background_normal`` name image files.
Given the line under the cursor, find the file the same way Kivy projects
usually lay them out and report its size and pixel dimensions.
"""

from __future__ import annotations

import logging
import re
import struct
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

IMAGE_PROPERTY = re.compile(
    r"""^\s*(source|background_normal|background_down|background_disabled_normal|background_disabled_down):"""
    r"""\s*['"]?(.+?)['"]?\s*$"""
)

IMAGE_EXTENSIONS = frozenset({".png", ".jpg", ".jpeg", ".gif", ".bmp", ".webp", ".svg"})

# Searched under the workspace root, then under the .kv file's directory
COMMON_IMAGE_DIRS = ("images", "assets", "img", "resources")

_PNG_HEADER_LENGTH = 24
_JPEG_FRAME_MARKERS = (0xC0, 0xC2)


@dataclass(frozen=True)
class ImageInfo:
    """An image file referenced from a KV property."""

    property_name: str
    image_path: str
    resolved_path: Path
    size_bytes: int
    width: int | None = None
    height: int | None = None

    @property
    def size_kb(self) -> str:
        return f"{self.size_bytes / 1024:.2f}"

    def to_markdown(self) -> str:
        """Hover body: preview, file name with dimensions, path and size."""
        name = Path(self.image_path).name
        dimensions = f" ({self.width}×{self.height})" if self.width is not None else ""
        return (
            f"![{name}]({self.resolved_path.resolve().as_uri()})\n\n"
            f"**File:** `{name}`{dimensions}\n\n"
            f"**Path:** `{self.image_path}`\n\n"
            f"**Size:** {self.size_kb} KB"
        )


def resolve_image_path(
    image_path: str,
    kv_dir: Path | None = None,
    workspace_root: Path | None = None,
) -> Path | None:
    """Find ``image_path`` on disk.

    Tried in order: the path itself when absolute, relative to the .kv
    file's directory, relative to the workspace root, then each of
    :data:`COMMON_IMAGE_DIRS` under the workspace root and the .kv directory.
    """
    path = Path(image_path)
    if path.is_absolute():
        return path if path.is_file() else None

    candidates: list[Path] = []
    if kv_dir is not None:
        candidates.append(kv_dir / path)
    if workspace_root is not None:
        candidates.append(workspace_root / path)
    for directory in COMMON_IMAGE_DIRS:
        if workspace_root is not None:
            candidates.append(workspace_root / directory / path)
        if kv_dir is not None:
            candidates.append(kv_dir / directory / path)

    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return None


def _png_dimensions(data: bytes) -> tuple[int, int] | None:
    if len(data) <= _PNG_HEADER_LENGTH:
        return None
    # Width and height open the IHDR chunk
    return struct.unpack_from(">II", data, 16)


def _jpeg_dimensions(data: bytes) -> tuple[int, int] | None:
    offset = 2
    while offset + 4 <= len(data):
        if data[offset] != 0xFF:
            return None
        marker = data[offset + 1]
        if marker in _JPEG_FRAME_MARKERS:
            height, width = struct.unpack_from(">HH", data, offset + 5)
            return width, height
        (segment_length,) = struct.unpack_from(">H", data, offset + 2)
        offset += 2 + segment_length
    return None


def image_dimensions(path: Path) -> tuple[int, int] | None:
    """(width, height) for PNG and JPEG files; None for other formats."""
    suffix = path.suffix.lower()
    if suffix not in (".png", ".jpg", ".jpeg"):
        return None

    try:
        data = path.read_bytes()
        if suffix == ".png":
            return _png_dimensions(data)
        return _jpeg_dimensions(data)
    except (OSError, struct.error) as e:
        logger.debug("Could not read dimensions of %s: %s", path, e)
        return None


def image_info(
    line_text: str,
    kv_path: Path | None = None,
    workspace_root: Path | None = None,
) -> ImageInfo | None:
    """Describe the image named on ``line_text``, if it names one that exists."""
    match = IMAGE_PROPERTY.match(line_text)
    if match is None:
        return None

    property_name = match.group(1)
    image_path = match.group(2).strip().replace("'", "").replace('"', "")
    if Path(image_path).suffix.lower() not in IMAGE_EXTENSIONS:
        return None

    kv_dir = Path(kv_path).parent if kv_path is not None else None
    root = Path(workspace_root) if workspace_root is not None else None
    resolved = resolve_image_path(image_path, kv_dir, root)
    if resolved is None:
        logger.debug("Image %r not found for %s", image_path, property_name)
        return None

    dimensions = image_dimensions(resolved)
    width, height = dimensions if dimensions else (None, None)
    return ImageInfo(
        property_name=property_name,
        image_path=image_path,
        resolved_path=resolved,
        size_bytes=resolved.stat().st_size,
        width=width,
        height=height,
    )
