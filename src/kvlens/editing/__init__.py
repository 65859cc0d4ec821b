"""Indentation-aware structural edits on KV source text."""

from .indent import (
    leading_spaces,
    round_indent,
    relative_indent,
    rebase_indent,
    reindent_block,
    anchor_snippet,
    strip_end_placeholder,
)
from .insert import insert_subtree
from .move import move_subtree, drop_snippet, full_extent, last_line, contains
from .blocks import WidgetBlock, widget_block_at, is_widget_header

__all__ = [
    "leading_spaces",
    "round_indent",
    "relative_indent",
    "rebase_indent",
    "reindent_block",
    "anchor_snippet",
    "strip_end_placeholder",
    "insert_subtree",
    "move_subtree",
    "drop_snippet",
    "full_extent",
    "last_line",
    "contains",
    "WidgetBlock",
    "widget_block_at",
    "is_widget_header",
]
