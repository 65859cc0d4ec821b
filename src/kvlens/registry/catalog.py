"""YAML-backed widget catalog."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from ..errors import RegistryError

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).parent / "data" / "kivy.yaml"


@dataclass(frozen=True)
class WidgetInfo:
    """Catalog entry for one widget type."""

    name: str
    base_classes: tuple[str, ...] = ()
    properties: dict[str, str] = field(default_factory=dict)


class CatalogRegistry:
    """Registry over an in-memory catalog, usually loaded from YAML.

    The catalog document looks like::

        widgets:
          Label:
            bases: [Widget]
            properties:
              text: StringProperty
        instructions:
          Color:
            rgba: color
    """

    def __init__(
        self,
        widgets: dict[str, WidgetInfo],
        instructions: dict[str, dict[str, str]] | None = None,
    ) -> None:
        self._widgets = dict(widgets)
        self._instructions = {k: dict(v) for k, v in (instructions or {}).items()}

    @classmethod
    def from_mapping(cls, data: dict) -> CatalogRegistry:
        """Build a registry from an already-decoded catalog document."""
        if not isinstance(data, dict):
            raise RegistryError("Catalog must be a mapping with 'widgets' and 'instructions'")

        widgets: dict[str, WidgetInfo] = {}
        for name, entry in (data.get("widgets") or {}).items():
            entry = entry or {}
            if not isinstance(entry, dict):
                raise RegistryError(f"Widget entry for {name!r} must be a mapping")
            widgets[name] = WidgetInfo(
                name=name,
                base_classes=tuple(entry.get("bases") or ()),
                properties={str(k): str(v) for k, v in (entry.get("properties") or {}).items()},
            )

        instructions: dict[str, dict[str, str]] = {}
        for name, params in (data.get("instructions") or {}).items():
            params = params or {}
            if not isinstance(params, dict):
                raise RegistryError(f"Instruction entry for {name!r} must be a mapping")
            instructions[name] = {str(k): str(v) for k, v in params.items()}

        return cls(widgets, instructions)

    @classmethod
    def from_path(cls, path: Path) -> CatalogRegistry:
        """Load a catalog from a YAML file."""
        try:
            raw = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise RegistryError(f"Cannot read catalog {path}: {e}") from e

        try:
            data = yaml.safe_load(raw) or {}
        except yaml.YAMLError as e:
            raise RegistryError(f"Invalid YAML in catalog {path}: {e}") from e

        registry = cls.from_mapping(data)
        logger.debug(
            "Loaded catalog %s: %d widgets, %d instructions",
            path,
            len(registry._widgets),
            len(registry._instructions),
        )
        return registry

    @classmethod
    def default(cls) -> CatalogRegistry:
        """Load the bundled Kivy catalog."""
        return cls.from_path(DEFAULT_CATALOG_PATH)

    def widget_info(self, type_name: str) -> WidgetInfo | None:
        return self._widgets.get(type_name)

    def widget_types(self) -> list[str]:
        return list(self._widgets)

    def base_classes(self, type_name: str) -> list[str]:
        info = self._widgets.get(type_name)
        return list(info.base_classes) if info else []

    def direct_properties(self, type_name: str) -> dict[str, str]:
        info = self._widgets.get(type_name)
        return dict(info.properties) if info else {}

    def property_type(self, name: str, type_name: str) -> str | None:
        """Resolve a property type, walking base classes depth-first."""
        seen: set[str] = set()
        pending = [type_name]

        while pending:
            current = pending.pop()
            if current in seen:
                continue
            seen.add(current)

            info = self._widgets.get(current)
            if info is None:
                continue
            if name in info.properties:
                return info.properties[name]
            # Reversed so the first declared base is searched first
            pending.extend(reversed(info.base_classes))

        return None

    def instruction_parameter_type(self, name: str, instruction_type: str) -> str | None:
        return self._instructions.get(instruction_type, {}).get(name)
