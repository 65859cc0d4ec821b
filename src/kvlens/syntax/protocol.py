"""Protocol for the external KV parser collaborator."""

from __future__ import annotations
from typing import Protocol, runtime_checkable, TYPE_CHECKING

if TYPE_CHECKING:
    from .models import KvModule


@runtime_checkable
class KvParser(Protocol):
    """Turns KV source text into a :class:`KvModule`.

    Tokenizing and parsing live outside kvlens. Implementations must raise
    :class:`kvlens.errors.KvParseError` when the source cannot be parsed;
    callers treat that as "no symbols" rather than reusing an older tree.
    """

    def parse(self, source: str) -> KvModule:
        """Parse a whole KV document.

        Args:
            source: Full document text.

        Returns:
            KvModule with rules in declaration order and the root widget,
            if any. All line numbers are 1-based.

        Raises:
            KvParseError: If the source cannot be parsed.
        """
        ...
