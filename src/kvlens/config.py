"""Configuration management for kvlens."""

import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv
from pydantic import BaseModel, Field


load_dotenv()


DEFAULT_INDENT_WIDTH = 4
DEFAULT_LOG_LEVEL = "WARNING"


class Config(BaseModel):
    """Application configuration."""

    # Registry Settings
    registry_path: Optional[Path] = Field(default=None)

    # Editing Settings
    indent_width: int = Field(default=DEFAULT_INDENT_WIDTH, ge=1)

    # Logging Settings
    log_level: str = Field(default=DEFAULT_LOG_LEVEL)

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        def _parse_int(value: Optional[str], fallback: int) -> int:
            try:
                parsed = int(value) if value is not None else fallback
            except ValueError:
                return fallback
            return parsed if parsed > 0 else fallback

        registry_env = os.getenv("KVLENS_REGISTRY")

        return cls(
            registry_path=Path(registry_env) if registry_env else None,
            indent_width=_parse_int(os.getenv("KVLENS_INDENT_WIDTH"), DEFAULT_INDENT_WIDTH),
            log_level=os.getenv("KVLENS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )
