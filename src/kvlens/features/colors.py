"""Color swatches for color-typed properties.

Kivy colors are written as tuples or lists of 0-1 floats, bare
comma-separated floats, or hex strings.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from ..outline.models import OutlineKind, OutlineNode

COLOR_DETAILS = frozenset({"ColorProperty", "color"})

_TUPLE = re.compile(r"^[\(\[](.+)[\)\]]$")
_HEX = re.compile(r"""^['"]?#([0-9a-fA-F]{6}|[0-9a-fA-F]{8})['"]?$""")
_LEADING_FLOAT = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class Color:
    """RGBA color with components in [0, 1]."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0


@dataclass(frozen=True)
class ColorInformation:
    """A color literal found on a 0-based line between two character offsets."""

    line: int
    start_character: int
    end_character: int
    color: Color


def _leading_float(text: str) -> float | None:
    match = _LEADING_FLOAT.match(text.strip())
    return float(match.group(0)) if match else None


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


def _components(text: str) -> Color | None:
    parts = [_leading_float(part) for part in text.split(",")]
    if len(parts) < 3 or any(p is None for p in parts):
        return None
    alpha = _clamp(parts[3]) if len(parts) >= 4 else 1.0
    return Color(_clamp(parts[0]), _clamp(parts[1]), _clamp(parts[2]), alpha)


def parse_color(value: str) -> Color | None:
    """Parse a Kivy color literal, or return ``None``."""
    trimmed = value.strip()

    tuple_match = _TUPLE.match(trimmed)
    if tuple_match:
        color = _components(tuple_match.group(1))
        if color is not None:
            return color
    elif "," in trimmed:
        color = _components(trimmed)
        if color is not None:
            return color

    hex_match = _HEX.match(trimmed)
    if hex_match:
        digits = hex_match.group(1)
        channels = [int(digits[i : i + 2], 16) / 255 for i in range(0, len(digits), 2)]
        alpha = channels[3] if len(channels) == 4 else 1.0
        return Color(channels[0], channels[1], channels[2], alpha)

    return None


def _color_for(node: OutlineNode, lines: list[str]) -> ColorInformation | None:
    line_number = node.range.start.line - 1
    if line_number < 0 or line_number >= len(lines):
        return None

    line_text = lines[line_number]
    colon = line_text.find(":")
    if colon == -1:
        return None

    raw_value = line_text[colon + 1 :]
    value = raw_value.lstrip()
    color = parse_color(value)
    if color is None:
        return None

    start = colon + 1 + (len(raw_value) - len(value))
    return ColorInformation(
        line=line_number,
        start_character=start,
        end_character=start + len(value.rstrip()),
        color=color,
    )


def document_colors(symbols: Iterable[OutlineNode], text: str) -> list[ColorInformation]:
    """Color literals assigned to color-typed properties below ``symbols``."""
    lines = text.split("\n")
    found: list[ColorInformation] = []

    def visit(symbol: OutlineNode) -> None:
        for child in symbol.children:
            if child.kind == OutlineKind.PROPERTY and child.detail in COLOR_DETAILS:
                info = _color_for(child, lines)
                if info is not None:
                    found.append(info)
            if child.children:
                visit(child)

    for symbol in symbols:
        visit(symbol)
    return found


def _fixed2(value: float) -> str:
    """Two decimals, ties rounded up."""
    return str(Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def _hex_channel(value: float) -> str:
    return f"{math.floor(value * 255 + 0.5):02x}"


def color_presentations(color: Color, line_text: str) -> list[str]:
    """Ways to write ``color`` back on ``line_text``.

    ``rgb:`` takes three components only, so alpha is forced to 1 and the
    four-component forms are left out.
    """
    is_rgba = "rgba:" in line_text
    is_rgb = "rgb:" in line_text and not is_rgba
    alpha = 1.0 if is_rgb else color.alpha

    rgb = ", ".join(_fixed2(c) for c in (color.red, color.green, color.blue))
    rgba = f"{rgb}, {_fixed2(alpha)}"

    presentations: list[str] = []
    if not is_rgb:
        presentations.append(rgba)
    presentations.append(rgb)
    if not is_rgb:
        presentations.append(f"({rgba})")
    presentations.append(f"({rgb})")

    hex_rgb = "#" + "".join(_hex_channel(c) for c in (color.red, color.green, color.blue))
    presentations.append(hex_rgb)
    if not is_rgb and alpha < 1:
        presentations.append(hex_rgb + _hex_channel(alpha))

    return presentations
