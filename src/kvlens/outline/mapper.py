"""Map a parsed KV module to outline nodes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .models import OutlineKind, OutlineNode, SourceRange
from ..syntax.models import KvCanvas, KvHandler, KvModule, KvProperty, KvRule, KvWidget

if TYPE_CHECKING:
    from ..registry.protocol import KivyRegistry

# Widgets with these names are drawing instructions even outside a canvas block
CANVAS_INSTRUCTIONS = frozenset({
    "Color", "Rectangle", "Ellipse", "Line", "Point", "Mesh", "Triangle", "Quad",
    "Bezier", "StencilPush", "StencilPop", "StencilUse", "StencilUnUse",
    "Scale", "Rotate", "PushMatrix", "PopMatrix", "Translate",
})

VALUE_HIGHLIGHT_WIDTH = 5

DEFAULT_PROPERTY_DETAIL = "Property"
DEFAULT_PARAMETER_DETAIL = "parameter"
EVENT_DETAIL = "event handler"
IDENTIFIER_DETAIL = "identifier"


class SymbolMapper:
    """Turn a :class:`KvModule` into an ordered list of outline nodes.

    The mapper is a pure function of the module and the registry. It does
    not handle parse failures: when the external parser fails, callers must
    present an empty outline instead of invoking the mapper.
    """

    def __init__(self, registry: KivyRegistry) -> None:
        self._registry = registry

    def map(self, module: KvModule) -> list[OutlineNode]:
        """One node per rule, in declaration order, then the root widget."""
        symbols = [self._rule_to_symbol(rule) for rule in module.rules]
        if module.root is not None:
            symbols.append(self._widget_to_symbol(module.root))
        return symbols

    def _rule_to_symbol(self, rule: KvRule) -> OutlineNode:
        children = [
            self._property_to_symbol(prop, rule.selector_name, instruction=False)
            for prop in rule.properties
        ]
        children.extend(self._handler_to_symbol(h) for h in rule.handlers)
        children.extend(self._widget_to_symbol(w) for w in rule.children)
        children.extend(self._canvas_blocks(rule))

        return self._node(
            name=rule.selector_name,
            detail="rule",
            kind=OutlineKind.RULE,
            line=rule.line,
            children=children,
        )

    def _widget_to_symbol(self, widget: KvWidget) -> OutlineNode:
        is_instruction = widget.name in CANVAS_INSTRUCTIONS
        name = f"{widget.name} (id: {widget.id})" if widget.id else widget.name

        children = [
            self._property_to_symbol(prop, widget.name, instruction=is_instruction)
            for prop in widget.properties
        ]
        children.extend(self._handler_to_symbol(h) for h in widget.handlers)
        children.extend(self._widget_to_symbol(w) for w in widget.children)
        children.extend(self._canvas_blocks(widget))

        return self._node(
            name=name,
            detail="canvas instruction" if is_instruction else "widget",
            kind=OutlineKind.CANVAS_INSTRUCTION if is_instruction else OutlineKind.WIDGET,
            line=widget.line,
            children=children,
        )

    def _canvas_blocks(self, owner: KvRule | KvWidget) -> list[OutlineNode]:
        blocks: list[OutlineNode] = []
        for label, canvas in (
            ("canvas", owner.canvas),
            ("canvas.before", owner.canvas_before),
            ("canvas.after", owner.canvas_after),
        ):
            if canvas is not None:
                blocks.append(self._canvas_to_symbol(canvas, label))
        return blocks

    def _canvas_to_symbol(self, canvas: KvCanvas, label: str) -> OutlineNode:
        instructions: list[OutlineNode] = []
        for instruction in canvas.instructions:
            params = [
                self._property_to_symbol(prop, instruction.instruction_type, instruction=True)
                for prop in instruction.properties
            ]
            instructions.append(self._node(
                name=instruction.instruction_type,
                detail="canvas instruction",
                kind=OutlineKind.CANVAS_INSTRUCTION,
                line=instruction.line,
                children=params,
            ))

        return self._node(
            name=label,
            detail="canvas block",
            kind=OutlineKind.CANVAS_BLOCK,
            line=canvas.line,
            children=instructions,
        )

    def _property_to_symbol(self, prop: KvProperty, owner: str, instruction: bool) -> OutlineNode:
        if prop.name.startswith("on_"):
            kind, detail = OutlineKind.EVENT, EVENT_DETAIL
        elif prop.name == "id":
            kind, detail = OutlineKind.IDENTIFIER, IDENTIFIER_DETAIL
        elif instruction:
            kind = OutlineKind.PROPERTY
            detail = (
                self._registry.instruction_parameter_type(prop.name, owner)
                or DEFAULT_PARAMETER_DETAIL
            )
        else:
            kind = OutlineKind.PROPERTY
            detail = self._registry.property_type(prop.name, owner) or DEFAULT_PROPERTY_DETAIL

        children: list[OutlineNode] = []
        if prop.value:
            value_range = SourceRange.from_line(prop.line, VALUE_HIGHLIGHT_WIDTH)
            children.append(OutlineNode(
                name=f"value: {prop.value}",
                kind=OutlineKind.VALUE,
                range=value_range,
                selection_range=value_range,
            ))

        return self._node(name=prop.name, detail=detail, kind=kind, line=prop.line, children=children)

    def _handler_to_symbol(self, handler: KvHandler) -> OutlineNode:
        return self._node(
            name=handler.name,
            detail=EVENT_DETAIL,
            kind=OutlineKind.EVENT,
            line=handler.line,
            children=[],
        )

    def _node(
        self,
        name: str,
        detail: str,
        kind: OutlineKind,
        line: int,
        children: list[OutlineNode],
    ) -> OutlineNode:
        """Build a node whose range covers its display name on its own line."""
        range_ = SourceRange.from_line(line, len(name))
        # Grouped by category above; restore source order (stable for equal lines)
        children.sort(key=lambda c: c.range.start.line)
        return OutlineNode(
            name=name,
            detail=detail,
            kind=kind,
            range=range_,
            selection_range=range_,
            children=children,
        )


def map_module(module: KvModule, registry: KivyRegistry) -> list[OutlineNode]:
    """Convenience wrapper around :meth:`SymbolMapper.map`."""
    return SymbolMapper(registry).map(module)
