"""Completion context classification and candidates."""

from .models import CompletionContext, CompletionItem, CompletionItemKind, InsertTextFormat
from .provider import (
    CompletionProvider,
    classify,
    classify_context,
    property_value_completions,
    split_lines,
)

__all__ = [
    "CompletionContext",
    "CompletionItem",
    "CompletionItemKind",
    "InsertTextFormat",
    "CompletionProvider",
    "classify",
    "classify_context",
    "property_value_completions",
    "split_lines",
]
