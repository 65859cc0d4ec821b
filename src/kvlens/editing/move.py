"""Outline-driven structural edits: moving and dropping subtrees.

Outline ranges are 1-based; all line arithmetic below is 0-based.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .indent import (
    DEFAULT_INDENT_WIDTH,
    anchor_snippet,
    leading_spaces,
    reindent_block,
    strip_end_placeholder,
)
from .insert import insert_subtree

if TYPE_CHECKING:
    from ..outline.models import OutlineNode

logger = logging.getLogger(__name__)


def last_line(node: OutlineNode) -> int:
    """1-based last line of ``node``, following the last child recursively."""
    if node.children:
        return last_line(node.children[-1])
    return node.range.end.line


def full_extent(node: OutlineNode) -> tuple[int, int]:
    """1-based inclusive (first, last) lines covered by ``node`` and its subtree."""
    return node.range.start.line, last_line(node)


def contains(ancestor: OutlineNode, node: OutlineNode) -> bool:
    """True when ``node`` is ``ancestor`` or one of its descendants."""
    return any(candidate is node or candidate == node for candidate in ancestor.walk())


def child_insertion_line(target: OutlineNode) -> int:
    """0-based line before which a new last child of ``target`` goes."""
    if target.children:
        return last_line(target.children[-1])
    return target.range.start.line


def _target_in_document(target: OutlineNode, lines: list[str]) -> bool:
    line = target.range.start.line
    if 1 <= line <= len(lines):
        return True
    logger.warning("Target %r (line %d) is outside the document", target.name, line)
    return False


def _splice(lines: list[str], at: int, block: list[str]) -> list[str]:
    """Insert ``block`` before line ``at``; past the end appends."""
    return lines[:at] + block + lines[at:]


def move_subtree(
    document: str,
    source: OutlineNode,
    target: OutlineNode | None,
    indent_width: int = DEFAULT_INDENT_WIDTH,
) -> str:
    """Move ``source`` (and its subtree) to become the last child of ``target``.

    With no ``target`` the block is appended unchanged at the end of the
    document. Moving a node onto itself or into its own subtree is refused
    and returns ``document`` unchanged, as is a source or target that lies
    outside the document.
    """
    if target is not None and contains(source, target):
        logger.warning(
            "Refusing to move %r into itself or its own descendant %r", source.name, target.name
        )
        return document

    lines = document.split("\n")
    if target is not None and not _target_in_document(target, lines):
        return document

    first, last = full_extent(source)
    start, end = first - 1, last - 1
    if start < 0 or end >= len(lines) or start > end:
        logger.warning("Source %r (lines %d-%d) is outside the document", source.name, first, last)
        return document

    block = lines[start : end + 1]

    # An interior block takes its trailing newline with it; a block ending on
    # the final line leaves the preceding newline (an empty last line) behind.
    if end < len(lines) - 1:
        remaining = lines[:start] + lines[end + 1 :]
        removed = end - start + 1
    else:
        remaining = lines[:start] + [""]
        removed = end - start

    if target is None:
        if remaining[-1] == "":
            return "\n".join(_splice(remaining, len(remaining) - 1, block))
        return "\n".join(remaining + block)

    at = child_insertion_line(target)
    if at > end:
        at -= removed

    target_indent = leading_spaces(lines[target.range.start.line - 1])
    moved = reindent_block(block, target_indent + indent_width)
    logger.debug(
        "Moving %r (lines %d-%d) under %r at line %d", source.name, first, last, target.name, at
    )
    return "\n".join(_splice(remaining, at, moved))


def drop_snippet(
    document: str,
    snippet: str,
    target: OutlineNode | None,
    indent_width: int = DEFAULT_INDENT_WIDTH,
) -> str:
    """Insert a palette snippet as the last child of ``target``.

    Without a target the snippet is appended as a top-level block at the end
    of the document. A target outside the document leaves it unchanged.
    """
    lines = document.split("\n")
    if target is None:
        return insert_subtree(document, snippet, len(lines), 0, indent_width)
    if not _target_in_document(target, lines):
        return document

    target_indent = leading_spaces(lines[target.range.start.line - 1])
    block = anchor_snippet(strip_end_placeholder(snippet).split("\n"), target_indent + indent_width)
    if not block:
        return document

    at = child_insertion_line(target)
    logger.debug("Dropping %d line(s) under %r at line %d", len(block), target.name, at)
    return "\n".join(_splice(lines, at, block))
