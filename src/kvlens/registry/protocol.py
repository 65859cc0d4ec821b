"""Protocol for widget/type registries.

The outline mapper and completion provider never reach for global state;
they receive a registry and only read from it. ``None`` is the "unknown"
answer for type lookups, empty collections for catalog lookups.
"""

from __future__ import annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class KivyRegistry(Protocol):
    """Read-only lookups over the widget and canvas-instruction catalog."""

    def widget_types(self) -> list[str]:
        """All widget type names known to the catalog.

        Returns:
            Type names in catalog order; callers sort as needed.
        """
        ...

    def base_classes(self, type_name: str) -> list[str]:
        """Direct base classes of a widget type.

        Args:
            type_name: Widget class name, e.g. ``Button``.

        Returns:
            Base class names in declaration order, or an empty list for
            unknown types and root classes.
        """
        ...

    def direct_properties(self, type_name: str) -> dict[str, str]:
        """Properties declared by the type itself (inherited ones excluded).

        Args:
            type_name: Widget class name.

        Returns:
            Mapping of property name to property type name, e.g.
            ``{"text": "StringProperty"}``; empty for unknown types.
        """
        ...

    def property_type(self, name: str, type_name: str) -> str | None:
        """Resolve a property's type, including inherited properties.

        Args:
            name: Property name as written in KV source.
            type_name: Owning widget type or rule selector name.

        Returns:
            Property type name, or None if neither the type nor any of its
            bases declares ``name``.
        """
        ...

    def instruction_parameter_type(self, name: str, instruction_type: str) -> str | None:
        """Resolve the type of a canvas-instruction parameter.

        Args:
            name: Parameter name, e.g. ``rgba``.
            instruction_type: Instruction name, e.g. ``Color``.

        Returns:
            Parameter type name, or None if unknown.
        """
        ...
