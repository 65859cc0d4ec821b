"""Outline (document symbol) data models."""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import IntEnum


class OutlineKind(IntEnum):
    """Outline node kinds.

    Values are the host's symbol-kind integers and must not change.
    """

    CANVAS_BLOCK = 2  # namespace
    RULE = 4  # class
    PROPERTY = 6
    CANVAS_INSTRUCTION = 13  # constant
    VALUE = 14  # string
    WIDGET = 18  # object
    IDENTIFIER = 19  # key
    EVENT = 23


@dataclass(frozen=True)
class SourcePosition:
    """A 1-based (line, column) position."""

    line: int
    column: int


@dataclass(frozen=True)
class SourceRange:
    """A start/end pair of 1-based positions."""

    start: SourcePosition
    end: SourcePosition

    @classmethod
    def from_line(cls, line: int, length: int, column: int = 1) -> SourceRange:
        """Single-line range starting at ``column`` and spanning ``length`` characters."""
        return cls(SourcePosition(line, column), SourcePosition(line, column + length))

    @property
    def start_line(self) -> int:
        return self.start.line

    @property
    def end_line(self) -> int:
        return self.end.line

    def to_dict(self) -> dict:
        return {
            "startLineNumber": self.start.line,
            "startColumn": self.start.column,
            "endLineNumber": self.end.line,
            "endColumn": self.end.column,
        }


@dataclass
class OutlineNode:
    """A node in the outline tree shown by the host."""

    name: str
    kind: OutlineKind
    range: SourceRange
    selection_range: SourceRange
    detail: str | None = None
    children: list[OutlineNode] = field(default_factory=list)

    def walk(self):
        """Yield this node and every descendant, depth-first, in order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def to_dict(self) -> dict:
        result = {
            "name": self.name,
            "kind": int(self.kind),
            "range": self.range.to_dict(),
            "selectionRange": self.selection_range.to_dict(),
        }
        if self.detail is not None:
            result["detail"] = self.detail
        if self.children:
            result["children"] = [c.to_dict() for c in self.children]
        return result
