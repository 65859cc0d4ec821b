"""Exception types raised at the edges of kvlens."""


class KvlensError(Exception):
    """Base class for kvlens errors."""


class KvParseError(KvlensError):
    """Raised by a parser collaborator when KV source cannot be parsed."""

    def __init__(self, message: str, line: int | None = None):
        super().__init__(message)
        self.line = line


class RegistryError(KvlensError):
    """Raised when a widget catalog cannot be loaded."""
