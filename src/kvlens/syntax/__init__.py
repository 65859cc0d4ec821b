"""Read-only KV document tree supplied by an external parser."""

from .models import (
    KvCanvas,
    KvHandler,
    KvInstruction,
    KvModule,
    KvProperty,
    KvRule,
    KvWidget,
)
from .protocol import KvParser

__all__ = [
    "KvCanvas",
    "KvHandler",
    "KvInstruction",
    "KvModule",
    "KvProperty",
    "KvRule",
    "KvWidget",
    "KvParser",
]
