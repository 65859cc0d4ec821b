"""Cursor-context classification and completion candidates.

The classifier only looks at the text of the cursor line; it never checks
whether the cursor sits inside a string or an expression. False positives
are acceptable, errors are not: out-of-range input yields no candidates.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from .models import CompletionContext, CompletionItem, CompletionItemKind, InsertTextFormat

if TYPE_CHECKING:
    from ..registry.protocol import KivyRegistry

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r\n|\r|\n")

SNIPPET_INDENT = "    "


def split_lines(text: str) -> list[str]:
    """Split on any line break; a trailing break yields a final empty line."""
    return _LINE_BREAK.split(text)


def classify_context(prefix: str) -> CompletionContext:
    """Decide the completion context from the text left of the cursor.

    Only leading whitespace is discarded, so ``"size_hint: "`` (colon then a
    space) is already a value position while ``"size_hint:"`` is not.
    """
    trimmed = prefix.lstrip()

    if ":" not in trimmed:
        return CompletionContext.WIDGET_NAME
    if "<" in trimmed and ">" not in trimmed:
        return CompletionContext.CLASS_DEFINITION
    if not trimmed.endswith(":"):
        return CompletionContext.PROPERTY_VALUE
    return CompletionContext.NONE


class CompletionProvider:
    """Completion candidates for KV source."""

    def __init__(self, registry: KivyRegistry) -> None:
        self._registry = registry

    def complete(self, text: str, line: int, character: int) -> list[CompletionItem]:
        """Candidates for a 0-based ``line`` / ``character`` cursor."""
        lines = split_lines(text)
        if line < 0 or line >= len(lines):
            logger.debug("Line %d out of bounds (total: %d)", line, len(lines))
            return []

        line_text = lines[line]
        prefix = line_text[: max(0, character)]
        context = classify_context(prefix)
        logger.debug("Completion context for %r: %s", prefix, context.value)

        if context is CompletionContext.WIDGET_NAME:
            items = self.widget_completions(class_definition=False)
        elif context is CompletionContext.CLASS_DEFINITION:
            items = self.widget_completions(class_definition=True)
        elif context is CompletionContext.PROPERTY_VALUE:
            items = property_value_completions(line_text)
        else:
            items = []

        logger.debug("Generated %d completions", len(items))
        return items

    def widget_completions(self, class_definition: bool = False) -> list[CompletionItem]:
        """One candidate per catalog widget type, alphabetical.

        Behavior mixins are only offered inside a ``<Class@...>`` header.
        """
        items: list[CompletionItem] = []

        for name in sorted(self._registry.widget_types()):
            if not class_definition and name.endswith("Behavior"):
                continue

            bases = self._registry.base_classes(name)
            # Class definitions also list the implicit Widget root
            tail = "Widget" if class_definition else ""
            detail = f"Inherits: {', '.join(bases)}, {tail}" if bases else "Widget"

            if class_definition:
                items.append(CompletionItem(
                    label=name,
                    kind=CompletionItemKind.CLASS,
                    detail=detail,
                    documentation=f"Kivy {name} widget (class definition)",
                    insert_text=name,
                    insert_text_format=InsertTextFormat.PLAIN_TEXT,
                ))
            else:
                items.append(CompletionItem(
                    label=name,
                    kind=CompletionItemKind.SNIPPET,
                    detail=detail,
                    documentation=f"Kivy {name} widget",
                    insert_text=self.widget_snippet(name),
                    insert_text_format=InsertTextFormat.SNIPPET,
                ))

        return items

    def widget_snippet(self, name: str) -> str:
        """``Name:`` followed by one tab-stop per direct property."""
        snippet_lines = [f"{name}:"]
        properties = sorted(self._registry.direct_properties(name))

        if not properties:
            snippet_lines.append(f"{SNIPPET_INDENT}${{1:# properties}}")
        for index, prop in enumerate(properties, start=1):
            snippet_lines.append(f"{SNIPPET_INDENT}{prop}: ${{{index}}}")

        return "\n".join(snippet_lines)


def _plain(label: str, kind: CompletionItemKind, detail: str) -> CompletionItem:
    return CompletionItem(
        label=label,
        kind=kind,
        detail=detail,
        insert_text=label,
        insert_text_format=InsertTextFormat.PLAIN_TEXT,
    )


def property_value_completions(line_text: str) -> list[CompletionItem]:
    """Value heuristics over the raw cursor line; more than one may fire."""
    items: list[CompletionItem] = []

    if ":" in line_text:
        items.append(_plain("True", CompletionItemKind.CONSTANT, "Boolean value"))
        items.append(_plain("False", CompletionItemKind.CONSTANT, "Boolean value"))

    if "orientation" in line_text:
        items.append(_plain("'vertical'", CompletionItemKind.VALUE, "Vertical orientation"))
        items.append(_plain("'horizontal'", CompletionItemKind.VALUE, "Horizontal orientation"))

    if "size_hint" in line_text:
        items.append(_plain("None, None", CompletionItemKind.VALUE, "No size hint"))
        items.append(_plain("1, 1", CompletionItemKind.VALUE, "Full size hint"))

    return items


def classify(text: str, line: int, character: int, registry: KivyRegistry) -> list[CompletionItem]:
    """Convenience wrapper around :meth:`CompletionProvider.complete`."""
    return CompletionProvider(registry).complete(text, line, character)
