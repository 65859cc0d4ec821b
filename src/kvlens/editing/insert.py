"""Insert a snippet subtree into KV source."""

from __future__ import annotations

import logging

from .indent import DEFAULT_INDENT_WIDTH, anchor_snippet, round_indent, strip_end_placeholder

logger = logging.getLogger(__name__)


def insert_subtree(
    source: str,
    snippet: str,
    target_line: int,
    target_column: int,
    indent_width: int = DEFAULT_INDENT_WIDTH,
) -> str:
    """Splice ``snippet`` into ``source`` before the 0-based ``target_line``.

    The snippet is anchored at ``target_column`` rounded down to a whole
    indent level, keeping its internal nesting. Blank snippet lines are
    dropped. A ``target_line`` past the end appends; a negative one
    prepends. An empty snippet returns ``source`` unchanged.
    """
    anchor = round_indent(target_column, indent_width)
    block = anchor_snippet(strip_end_placeholder(snippet).split("\n"), anchor)
    if not block:
        return source

    lines = source.split("\n")
    at = min(max(0, target_line), len(lines))
    logger.debug("Inserting %d line(s) at line %d, indent %d", len(block), at, anchor)

    return "\n".join(lines[:at] + block + lines[at:])
