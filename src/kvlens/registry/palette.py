"""Categorized palette of insertable widget snippets.

Each snippet ends with the ``$0`` final tab-stop; the structural editor
strips it before splicing text into a document.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class PaletteEntry:
    """One draggable widget in the palette."""

    name: str
    category: str
    snippet: str


PALETTE: tuple[PaletteEntry, ...] = (
    # Layouts
    PaletteEntry("BoxLayout", "Layouts", 'BoxLayout:\n    orientation: "vertical"\n    $0'),
    PaletteEntry("GridLayout", "Layouts", "GridLayout:\n    cols: 2\n    $0"),
    PaletteEntry("StackLayout", "Layouts", 'StackLayout:\n    orientation: "lr-tb"\n    $0'),
    PaletteEntry(
        "AnchorLayout",
        "Layouts",
        'AnchorLayout:\n    anchor_x: "center"\n    anchor_y: "center"\n    $0',
    ),
    PaletteEntry("FloatLayout", "Layouts", "FloatLayout:\n    $0"),
    PaletteEntry("RelativeLayout", "Layouts", "RelativeLayout:\n    $0"),
    PaletteEntry("PageLayout", "Layouts", "PageLayout:\n    $0"),
    PaletteEntry("ScatterLayout", "Layouts", "ScatterLayout:\n    $0"),
    # Basic widgets
    PaletteEntry("Label", "Widgets", 'Label:\n    text: "Hello World"\n    $0'),
    PaletteEntry("Button", "Widgets", 'Button:\n    text: "Click Me"\n    on_press: $0'),
    PaletteEntry("Image", "Widgets", 'Image:\n    source: "path/to/image.png"\n    $0'),
    PaletteEntry("TextInput", "Widgets", 'TextInput:\n    text: ""\n    multiline: False\n    $0'),
    PaletteEntry("Slider", "Widgets", "Slider:\n    min: 0\n    max: 100\n    value: 50\n    $0"),
    PaletteEntry("ProgressBar", "Widgets", "ProgressBar:\n    value: 50\n    max: 100\n    $0"),
    PaletteEntry("CheckBox", "Widgets", "CheckBox:\n    active: False\n    $0"),
    PaletteEntry("Switch", "Widgets", "Switch:\n    active: False\n    $0"),
    PaletteEntry(
        "ToggleButton",
        "Widgets",
        'ToggleButton:\n    text: "Toggle"\n    state: "normal"\n    $0',
    ),
    PaletteEntry("Spinner", "Widgets", 'Spinner:\n    text: "Select"\n    values: []\n    $0'),
    # Containers
    PaletteEntry("ScrollView", "Containers", "ScrollView:\n    $0"),
    PaletteEntry("Carousel", "Containers", 'Carousel:\n    direction: "right"\n    $0'),
    PaletteEntry("ScreenManager", "Containers", "ScreenManager:\n    $0"),
    PaletteEntry("TabbedPanel", "Containers", "TabbedPanel:\n    do_default_tab: False\n    $0"),
    PaletteEntry("Accordion", "Containers", "Accordion:\n    $0"),
    # Media
    PaletteEntry("Video", "Media", 'Video:\n    source: "path/to/video.mp4"\n    $0'),
    PaletteEntry("Camera", "Media", "Camera:\n    resolution: (640, 480)\n    $0"),
    # Dialogs
    PaletteEntry("FileChooser", "Dialogs", "FileChooser:\n    $0"),
    PaletteEntry(
        "Popup",
        "Dialogs",
        'Popup:\n    title: "Popup"\n    size_hint: (0.8, 0.8)\n    $0',
    ),
)


def palette_categories() -> list[str]:
    """Category names in first-seen order."""
    categories: list[str] = []
    for entry in PALETTE:
        if entry.category not in categories:
            categories.append(entry.category)
    return categories


def palette_entries(category: str | None = None) -> list[PaletteEntry]:
    """All entries, or only those in ``category``."""
    if category is None:
        return list(PALETTE)
    return [entry for entry in PALETTE if entry.category == category]


def find_palette_entry(name: str) -> PaletteEntry | None:
    for entry in PALETTE:
        if entry.name == name:
            return entry
    return None
