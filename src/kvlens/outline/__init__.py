"""Outline (document symbol) extraction."""

from .models import OutlineKind, OutlineNode, SourcePosition, SourceRange
from .mapper import SymbolMapper, map_module, CANVAS_INSTRUCTIONS

__all__ = [
    "OutlineKind",
    "OutlineNode",
    "SourcePosition",
    "SourceRange",
    "SymbolMapper",
    "map_module",
    "CANVAS_INSTRUCTIONS",
]
