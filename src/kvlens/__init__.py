"""kvlens - editor intelligence for the Kivy KV language."""

__version__ = "0.1.0"

from .config import Config
from .errors import KvlensError, KvParseError, RegistryError
from .models import EditResult
from .outline import OutlineKind, OutlineNode, SymbolMapper
from .completion import CompletionItem, CompletionProvider
from .registry import CatalogRegistry, KivyRegistry
from .syntax import KvModule, KvParser
from .service import KvLanguageService

__all__ = [
    "Config",
    "KvlensError",
    "KvParseError",
    "RegistryError",
    "EditResult",
    "OutlineKind",
    "OutlineNode",
    "SymbolMapper",
    "CompletionItem",
    "CompletionProvider",
    "CatalogRegistry",
    "KivyRegistry",
    "KvModule",
    "KvParser",
    "KvLanguageService",
]
