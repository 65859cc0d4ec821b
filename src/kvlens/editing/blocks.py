"""Locate the text block owned by a widget line."""

from __future__ import annotations

import re
from dataclasses import dataclass

# An uppercase-leading identifier followed by a colon is a widget header.
# This is a convention, not a grammar check: ``Color:`` inside a canvas
# matches too, ``on_press:`` never does.
WIDGET_HEADER = re.compile(r"^(\s*)([A-Z]\w*):")


@dataclass(frozen=True)
class WidgetBlock:
    """Source text of one widget and its nested lines (0-based lines)."""

    name: str
    code: str
    start_line: int
    end_line: int
    line_count: int


def is_widget_header(line: str) -> bool:
    return WIDGET_HEADER.match(line) is not None


def widget_block_at(text: str, line: int) -> WidgetBlock | None:
    """The widget block whose header is on 0-based ``line``, if any.

    Every following non-blank line indented deeper than the header belongs
    to the block; blank lines are skipped rather than ending it.
    """
    lines = text.split("\n")
    if line < 0 or line >= len(lines):
        return None

    header = WIDGET_HEADER.match(lines[line])
    if header is None:
        return None

    base_indent = len(header.group(1))
    block = [lines[line]]
    end_line = line

    for index in range(line + 1, len(lines)):
        current = lines[index]
        if not current.strip():
            continue
        if len(current) - len(current.lstrip()) <= base_indent:
            break
        block.append(current)
        end_line = index

    return WidgetBlock(
        name=header.group(2),
        code="\n".join(block),
        start_line=line,
        end_line=end_line,
        line_count=len(block),
    )
