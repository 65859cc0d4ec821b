"""Widget catalog and palette lookups."""

from .protocol import KivyRegistry
from .catalog import CatalogRegistry, WidgetInfo, DEFAULT_CATALOG_PATH
from .palette import (
    PaletteEntry,
    PALETTE,
    palette_categories,
    palette_entries,
    find_palette_entry,
)

__all__ = [
    "KivyRegistry",
    "CatalogRegistry",
    "WidgetInfo",
    "DEFAULT_CATALOG_PATH",
    "PaletteEntry",
    "PALETTE",
    "palette_categories",
    "palette_entries",
    "find_palette_entry",
]
