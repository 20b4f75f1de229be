"""Generator protocol and attribute helpers shared by generator families."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from patterncss.model.block import BlockNode
from patterncss.model.context import GenerationContext
from patterncss.stylesheet.model import css_text, is_valid_css_value


class Generator(Protocol):
    """A block family's CSS generator.

    ``can_handle`` must be a pure test on the block name; ``generate_css``
    covers the given node only and never looks at its children.
    """

    name: str

    def can_handle(self, block_name: str) -> bool: ...

    def generate_css(self, block: BlockNode, context: GenerationContext) -> str: ...


def text(mapping: Mapping[str, Any], key: str) -> str | None:
    """Return ``mapping[key]`` if it is a non-empty string, else None."""
    value = mapping.get(key)
    if isinstance(value, str) and value:
        return value
    return None


def scalar(mapping: Mapping[str, Any], key: str) -> str | None:
    """Return ``mapping[key]`` stringified if it is a usable CSS scalar."""
    value = mapping.get(key)
    if is_valid_css_value(value):
        return css_text(value)
    return None


def lookup(table: Mapping[str, dict[str, str]], value: str | None, default: str) -> dict[str, str]:
    """Map an enum-like attribute value through *table*, falling back to *default*."""
    if value is not None and value in table:
        return table[value]
    return table[default]
