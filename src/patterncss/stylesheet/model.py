"""Stylesheet model: the CSSRule dataclass and value validation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

INDENT = "    "


def is_valid_css_value(value: Any) -> bool:
    """Return True for non-empty scalar values that can be written into CSS.

    Booleans are rejected even though they are ints; ``0`` and ``"0"`` are
    accepted (``flex-grow: 0`` is meaningful).
    """
    if isinstance(value, bool) or value is None:
        return False
    if isinstance(value, str):
        return value != ""
    return isinstance(value, (int, float))


def css_text(value: int | float | str) -> str:
    """Stringify a CSS value; integral floats are written without ``.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def filter_properties(properties: Mapping[str, Any]) -> dict[str, str]:
    """Drop invalid values and stringify the rest, keeping insertion order."""
    return {
        prop: css_text(value)
        for prop, value in properties.items()
        if is_valid_css_value(value)
    }


@dataclass(frozen=True)
class CSSRule:
    """A selector paired with its property declarations."""

    selector: str
    properties: dict[str, str]  # insertion order is output order

    def render(self) -> str:
        lines = [f"{self.selector} {{"]
        for prop, value in self.properties.items():
            lines.append(f"{INDENT}{prop}: {value};")
        lines.append("}")
        return "\n".join(lines) + "\n"
