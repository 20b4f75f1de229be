"""Block tree model: the immutable BlockNode dataclass."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

_MISSING = object()


@dataclass(frozen=True)
class BlockNode:
    """A single parsed block with its attributes and inner blocks.

    ``name`` is empty for freeform content between blocks (the parser emits
    ``blockName: null`` for those).
    """

    name: str = ""
    attributes: Mapping[str, Any] = field(default_factory=dict)
    children: tuple[BlockNode, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))
        object.__setattr__(self, "children", tuple(self.children))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BlockNode:
        """Build a node from a parse_blocks-style or plain dict.

        Both ``blockName``/``attrs``/``innerBlocks`` and
        ``name``/``attributes``/``children`` key conventions are accepted.
        """
        name = data.get("blockName", data.get("name"))
        attrs = data.get("attrs", data.get("attributes"))
        inner = data.get("innerBlocks", data.get("children"))

        if not isinstance(attrs, Mapping):
            attrs = {}
        children: list[BlockNode] = []
        if isinstance(inner, (list, tuple)):
            for child in inner:
                if isinstance(child, BlockNode):
                    children.append(child)
                elif isinstance(child, Mapping):
                    children.append(cls.from_dict(child))
        return cls(
            name=name if isinstance(name, str) else "",
            attributes=attrs,
            children=tuple(children),
        )

    def get(self, path: str, default: Any = None) -> Any:
        """Look up a dotted attribute path such as ``style.spacing.blockGap``.

        Returns *default* when any segment is missing or not a mapping.
        """
        current: Any = self.attributes
        for segment in path.split("."):
            if not isinstance(current, Mapping):
                return default
            current = current.get(segment, _MISSING)
            if current is _MISSING:
                return default
        return current

    def get_mapping(self, path: str) -> Mapping[str, Any]:
        """Like :meth:`get` but always returns a mapping (empty if absent)."""
        value = self.get(path)
        return value if isinstance(value, Mapping) else {}

    def walk(self) -> Iterator[BlockNode]:
        """Yield this node and its descendants, parent before children."""
        yield self
        for child in self.children:
            yield from child.walk()

    @property
    def namespace(self) -> str:
        """Return the part of the name before the slash (``core`` for ``core/group``)."""
        head, sep, _ = self.name.partition("/")
        return head if sep else ""
