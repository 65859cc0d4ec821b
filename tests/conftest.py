"""Pytest configuration and shared fixtures."""

import pytest

from kvlens.config import Config
from kvlens.errors import KvParseError
from kvlens.outline import SymbolMapper
from kvlens.registry import CatalogRegistry
from kvlens.service import KvLanguageService
from kvlens.syntax import (
    KvCanvas,
    KvHandler,
    KvInstruction,
    KvModule,
    KvProperty,
    KvRule,
    KvWidget,
)


SAMPLE_KV = """<MyLabel@Label>:
    color: 1, 0, 0, 1
    on_touch_down: print('hit')

BoxLayout:
    orientation: 'vertical'
    id: root_box
    Label:
        id: greeting
        text: 'Hello'
        canvas.before:
            Color:
                rgba: 0, 0, 1, 1
            Rectangle:
                pos: self.pos
    Button:
        text: 'Go'
        on_press: root.go()
    Rectangle:
        size: 10, 10
"""


CATALOG = {
    "widgets": {
        "Widget": {
            "bases": [],
            "properties": {
                "opacity": "NumericProperty",
                "size_hint": "ReferenceListProperty",
                "x": "NumericProperty",
            },
        },
        "ButtonBehavior": {"bases": [], "properties": {"state": "OptionProperty"}},
        "Label": {
            "bases": ["Widget"],
            "properties": {
                "color": "ColorProperty",
                "font_size": "NumericProperty",
                "text": "StringProperty",
            },
        },
        "Button": {"bases": ["ButtonBehavior", "Label"], "properties": {}},
        "BoxLayout": {
            "bases": ["Widget"],
            "properties": {"spacing": "NumericProperty", "orientation": "OptionProperty"},
        },
    },
    "instructions": {
        "Color": {"rgba": "color", "rgb": "color"},
        "Rectangle": {"pos": "position", "size": "size"},
    },
}


class DictParser:
    """Stand-in for the external parser: knows a fixed set of documents."""

    def __init__(self, documents: dict[str, KvModule]):
        self.documents = documents

    def parse(self, source: str) -> KvModule:
        if source not in self.documents:
            raise KvParseError("unexpected token", line=1)
        return self.documents[source]


@pytest.fixture
def registry() -> CatalogRegistry:
    """Small fixed catalog so tests do not depend on the bundled data."""
    return CatalogRegistry.from_mapping(CATALOG)


@pytest.fixture
def sample_kv() -> str:
    return SAMPLE_KV


@pytest.fixture
def sample_module() -> KvModule:
    """The tree an external parser produces for SAMPLE_KV."""
    rule = KvRule(
        selector_name="MyLabel@Label",
        line=1,
        properties=(
            KvProperty("color", "1, 0, 0, 1", 2),
            KvProperty("on_touch_down", "print('hit')", 3),
        ),
    )
    label = KvWidget(
        name="Label",
        line=8,
        id="greeting",
        properties=(KvProperty("text", "'Hello'", 10),),
        canvas_before=KvCanvas(
            line=11,
            instructions=(
                KvInstruction("Color", 12, (KvProperty("rgba", "0, 0, 1, 1", 13),)),
                KvInstruction("Rectangle", 14, (KvProperty("pos", "self.pos", 15),)),
            ),
        ),
    )
    button = KvWidget(
        name="Button",
        line=16,
        properties=(KvProperty("text", "'Go'", 17),),
        handlers=(KvHandler("on_press", 18),),
    )
    rectangle = KvWidget(
        name="Rectangle",
        line=19,
        properties=(KvProperty("size", "10, 10", 20),),
    )
    root = KvWidget(
        name="BoxLayout",
        line=5,
        properties=(
            KvProperty("orientation", "'vertical'", 6),
            KvProperty("id", "root_box", 7),
        ),
        children=(label, button, rectangle),
    )
    return KvModule(rules=(rule,), root=root)


@pytest.fixture
def sample_outline(registry, sample_module):
    return SymbolMapper(registry).map(sample_module)


@pytest.fixture
def parser(sample_kv, sample_module) -> DictParser:
    return DictParser({sample_kv: sample_module})


@pytest.fixture
def service(registry, parser) -> KvLanguageService:
    return KvLanguageService(registry, parser=parser, config=Config())
