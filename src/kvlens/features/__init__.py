"""Editor features computed from the outline and raw text."""

from .inlay_hints import InlayHint, inlay_hints
from .colors import Color, ColorInformation, parse_color, document_colors, color_presentations
from .images import ImageInfo, image_info, image_dimensions, resolve_image_path

__all__ = [
    "InlayHint",
    "inlay_hints",
    "Color",
    "ColorInformation",
    "parse_color",
    "document_colors",
    "color_presentations",
    "ImageInfo",
    "image_info",
    "image_dimensions",
    "resolve_image_path",
]
