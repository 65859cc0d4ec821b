"""Indentation arithmetic shared by the structural edits."""

from __future__ import annotations

DEFAULT_INDENT_WIDTH = 4

END_PLACEHOLDER = "$0"


def leading_spaces(line: str) -> int:
    """Number of leading space characters."""
    return len(line) - len(line.lstrip(" "))


def is_blank(line: str) -> bool:
    return not line.strip()


def round_indent(column: int, width: int = DEFAULT_INDENT_WIDTH) -> int:
    """Floor ``column`` to a multiple of ``width``; never negative."""
    return max(0, (column // width) * width)


def relative_indent(indent: int, base: int) -> int:
    """Indent of a line relative to its block's base, floored at zero."""
    return max(0, indent - base)


def rebase_indent(indent: int, old_base: int, new_base: int) -> int:
    """Move a line from a block based at ``old_base`` to one based at ``new_base``."""
    return max(0, new_base + indent - old_base)


def strip_end_placeholder(snippet: str) -> str:
    """Remove a single trailing ``$0`` tab-stop, if present."""
    stripped = snippet.rstrip()
    if stripped.endswith(END_PLACEHOLDER):
        return stripped[: -len(END_PLACEHOLDER)]
    return snippet


def first_content_indent(lines: list[str]) -> int:
    """Leading spaces of the first non-blank line, or 0."""
    for line in lines:
        if not is_blank(line):
            return leading_spaces(line)
    return 0


def anchor_snippet(lines: list[str], anchor: int) -> list[str]:
    """Re-anchor snippet lines at ``anchor`` spaces, dropping blank lines.

    Nesting relative to the first non-blank line is kept; lines indented
    less than that line are clamped to the anchor.
    """
    base = first_content_indent(lines)
    return [
        " " * (anchor + relative_indent(leading_spaces(line), base)) + line.strip()
        for line in lines
        if not is_blank(line)
    ]


def reindent_block(lines: list[str], new_base: int) -> list[str]:
    """Shift a block so its first line sits at ``new_base``; blank lines become empty."""
    if not lines:
        return []
    old_base = leading_spaces(lines[0])
    return [
        "" if is_blank(line)
        else " " * rebase_indent(leading_spaces(line), old_base, new_base) + line.strip()
        for line in lines
    ]
