"""Inlay type hints derived from the outline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..outline.models import OutlineKind, OutlineNode

TYPE_HINT_KIND = 1

# Details that describe the node itself rather than a property type
_NON_TYPE_DETAILS = ("handler", "identifier", "widget", "canvas")


@dataclass(frozen=True)
class InlayHint:
    """A type label rendered inline after a property (0-based position)."""

    line: int
    character: int
    label: str
    kind: int = TYPE_HINT_KIND
    padding_left: bool = True
    padding_right: bool = False

    def to_dict(self) -> dict:
        return {
            "position": {"line": self.line, "character": self.character},
            "label": self.label,
            "kind": self.kind,
            "paddingLeft": self.padding_left,
            "paddingRight": self.padding_right,
        }


def _is_typed_property(node: OutlineNode) -> bool:
    if node.kind != OutlineKind.PROPERTY or not node.detail:
        return False
    return not any(word in node.detail for word in _NON_TYPE_DETAILS)


def _hint_for(node: OutlineNode, lines: list[str]) -> InlayHint | None:
    line_number = node.range.start.line - 1
    if line_number < 0 or line_number >= len(lines):
        return None

    line_text = lines[line_number]
    colon = line_text.find(":")
    if colon == -1:
        return None

    has_value = bool(line_text[colon + 1 :].strip())
    character = len(line_text.rstrip()) if has_value else colon + 1
    return InlayHint(line=line_number, character=character, label=f" {node.detail}")


def inlay_hints(symbols: Iterable[OutlineNode], text: str) -> list[InlayHint]:
    """Type hints for typed properties below the given symbols."""
    lines = text.split("\n")
    hints: list[InlayHint] = []

    def visit(symbol: OutlineNode) -> None:
        for child in symbol.children:
            if child.name.startswith("value:"):
                continue
            if _is_typed_property(child):
                hint = _hint_for(child, lines)
                if hint is not None:
                    hints.append(hint)
            if child.children:
                visit(child)

    for symbol in symbols:
        visit(symbol)
    return hints
