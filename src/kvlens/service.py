"""KvLanguageService: one entry point for editor hosts.

Composes the external parser, a registry, the symbol mapper, the completion
provider and the structural editor.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import TYPE_CHECKING

from .completion import CompletionItem, CompletionProvider
from .config import Config
from .editing import WidgetBlock, drop_snippet, insert_subtree, move_subtree, widget_block_at
from .errors import KvParseError
from .features import ColorInformation, ImageInfo, InlayHint, document_colors, image_info, inlay_hints
from .models import EditResult
from .outline import OutlineNode, SymbolMapper

if TYPE_CHECKING:
    from .registry.protocol import KivyRegistry
    from .syntax.models import KvModule
    from .syntax.protocol import KvParser

logger = logging.getLogger(__name__)


def _is_number(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return isinstance(value, int) or math.isfinite(value)


class KvLanguageService:
    """Editor intelligence for KV documents.

    Usage:
        service = KvLanguageService(CatalogRegistry.default(), parser=my_parser)

        symbols = service.document_symbols(text)         # outline
        items = service.completions(text, line=3, character=8)
        result = service.add_widget(text, snippet, line=4, column=8)
    """

    def __init__(
        self,
        registry: KivyRegistry,
        parser: KvParser | None = None,
        config: Config | None = None,
    ) -> None:
        self._registry = registry
        self._parser = parser
        self._config = config or Config()
        self._mapper = SymbolMapper(registry)
        self._completion = CompletionProvider(registry)

    @property
    def registry(self) -> KivyRegistry:
        return self._registry

    @property
    def indent_width(self) -> int:
        return self._config.indent_width

    def symbols_for_module(self, module: KvModule) -> list[OutlineNode]:
        """Outline for an already-parsed module."""
        return self._mapper.map(module)

    def document_symbols(self, source: str) -> list[OutlineNode]:
        """Parse ``source`` and map it; a parse failure means no symbols."""
        if self._parser is None:
            logger.warning("No KV parser configured; returning an empty outline")
            return []

        try:
            module = self._parser.parse(source)
        except KvParseError as e:
            logger.warning("Error extracting symbols: %s", e)
            return []
        except Exception as e:
            logger.warning("Parser failed unexpectedly: %s: %s", type(e).__name__, e)
            return []

        return self._mapper.map(module)

    def completions(self, source: str, line: int, character: int) -> list[CompletionItem]:
        return self._completion.complete(source, line, character)

    def add_widget(self, kv_code: str, snippet: str, line: int, column: int) -> EditResult:
        """Insert ``snippet`` at a 1-based ``line`` dropped on by the host."""
        texts_ok = isinstance(kv_code, str) and isinstance(snippet, str)
        if not texts_ok or not (_is_number(line) and _is_number(column)):
            return EditResult.failed("Invalid arguments")

        logger.debug("Drop at line %s, column %s", line, column)
        new_code = insert_subtree(
            kv_code, snippet, int(line) - 1, int(column), indent_width=self.indent_width
        )
        return EditResult.ok(new_code)

    def move_item(self, source_text: str, item: OutlineNode, target: OutlineNode | None) -> str:
        return move_subtree(source_text, item, target, indent_width=self.indent_width)

    def drop_snippet(self, source_text: str, snippet: str, target: OutlineNode | None) -> str:
        return drop_snippet(source_text, snippet, target, indent_width=self.indent_width)

    def inlay_hints(self, source: str) -> list[InlayHint]:
        return inlay_hints(self.document_symbols(source), source)

    def document_colors(self, source: str) -> list[ColorInformation]:
        return document_colors(self.document_symbols(source), source)

    def widget_block(self, source: str, line: int) -> WidgetBlock | None:
        return widget_block_at(source, line)

    def image_info(
        self,
        source: str,
        line: int,
        kv_path: Path | None = None,
        workspace_root: Path | None = None,
    ) -> ImageInfo | None:
        """Image referenced on 0-based ``line`` of ``source``, for hovers."""
        lines = source.split("\n")
        if line < 0 or line >= len(lines):
            return None
        return image_info(lines[line], kv_path=kv_path, workspace_root=workspace_root)
