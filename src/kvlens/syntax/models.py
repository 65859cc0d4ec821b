"""Parsed KV document tree.

These records are produced by an external parser and consumed read-only.
Every ``line`` is 1-based. Nodes are owned top-down; there are no parent
references, so any traversal is a plain recursive walk.
"""

from __future__ import annotations
from dataclasses import dataclass, field


@dataclass(frozen=True)
class KvProperty:
    """A ``name: value`` assignment."""

    name: str
    value: str
    line: int

    @classmethod
    def from_dict(cls, data: dict) -> KvProperty:
        return cls(name=data["name"], value=data.get("value", ""), line=data["line"])


@dataclass(frozen=True)
class KvHandler:
    """An event handler binding."""

    name: str
    line: int

    @classmethod
    def from_dict(cls, data: dict) -> KvHandler:
        return cls(name=data["name"], line=data["line"])


@dataclass(frozen=True)
class KvInstruction:
    """A drawing instruction inside a canvas block."""

    instruction_type: str
    line: int
    properties: tuple[KvProperty, ...] = ()

    @classmethod
    def from_dict(cls, data: dict) -> KvInstruction:
        return cls(
            instruction_type=data["instructionType"],
            line=data["line"],
            properties=tuple(KvProperty.from_dict(p) for p in data.get("properties", [])),
        )


@dataclass(frozen=True)
class KvCanvas:
    """A ``canvas``, ``canvas.before`` or ``canvas.after`` block."""

    line: int
    instructions: tuple[KvInstruction, ...] = ()

    @classmethod
    def from_dict(cls, data: dict | None) -> KvCanvas | None:
        if data is None:
            return None
        return cls(
            line=data["line"],
            instructions=tuple(KvInstruction.from_dict(i) for i in data.get("instructions", [])),
        )


@dataclass(frozen=True)
class KvWidget:
    """A widget instance in the widget tree."""

    name: str
    line: int
    id: str | None = None
    properties: tuple[KvProperty, ...] = ()
    handlers: tuple[KvHandler, ...] = ()
    children: tuple[KvWidget, ...] = ()
    canvas: KvCanvas | None = None
    canvas_before: KvCanvas | None = None
    canvas_after: KvCanvas | None = None

    @classmethod
    def from_dict(cls, data: dict) -> KvWidget:
        return cls(
            name=data["name"],
            line=data["line"],
            id=data.get("id"),
            properties=tuple(KvProperty.from_dict(p) for p in data.get("properties", [])),
            handlers=tuple(KvHandler.from_dict(h) for h in data.get("handlers", [])),
            children=tuple(cls.from_dict(c) for c in data.get("children", [])),
            canvas=KvCanvas.from_dict(data.get("canvas")),
            canvas_before=KvCanvas.from_dict(data.get("canvasBefore")),
            canvas_after=KvCanvas.from_dict(data.get("canvasAfter")),
        )


@dataclass(frozen=True)
class KvRule:
    """A top-level ``<Name>`` or ``<Name@Base>`` rule."""

    selector_name: str
    line: int
    properties: tuple[KvProperty, ...] = ()
    handlers: tuple[KvHandler, ...] = ()
    children: tuple[KvWidget, ...] = ()
    canvas: KvCanvas | None = None
    canvas_before: KvCanvas | None = None
    canvas_after: KvCanvas | None = None

    @classmethod
    def from_dict(cls, data: dict) -> KvRule:
        return cls(
            selector_name=data["selectorName"],
            line=data["line"],
            properties=tuple(KvProperty.from_dict(p) for p in data.get("properties", [])),
            handlers=tuple(KvHandler.from_dict(h) for h in data.get("handlers", [])),
            children=tuple(KvWidget.from_dict(c) for c in data.get("children", [])),
            canvas=KvCanvas.from_dict(data.get("canvas")),
            canvas_before=KvCanvas.from_dict(data.get("canvasBefore")),
            canvas_after=KvCanvas.from_dict(data.get("canvasAfter")),
        )


@dataclass(frozen=True)
class KvModule:
    """A whole KV document: rules plus an optional root widget."""

    rules: tuple[KvRule, ...] = field(default_factory=tuple)
    root: KvWidget | None = None

    @classmethod
    def from_dict(cls, data: dict) -> KvModule:
        root = data.get("root")
        return cls(
            rules=tuple(KvRule.from_dict(r) for r in data.get("rules", [])),
            root=KvWidget.from_dict(root) if root else None,
        )
