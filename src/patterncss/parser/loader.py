"""Load a JSON-serialized block tree (parse_blocks output) into BlockNodes."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path

from patterncss.errors import BlockTreeError
from patterncss.model.block import BlockNode

__all__ = ["load_blocks", "load_blocks_file"]


def load_blocks(source: str) -> list[BlockNode]:
    """Parse a JSON block tree into a list of root BlockNodes.

    The root may be a list of blocks or a single block object. List items
    that are not objects are ignored.
    """
    try:
        data = json.loads(source)
    except json.JSONDecodeError as exc:
        raise BlockTreeError(
            f"Invalid block tree JSON: {exc.msg}", line=exc.lineno, column=exc.colno
        ) from exc

    if isinstance(data, Mapping):
        return [BlockNode.from_dict(data)]
    if isinstance(data, list):
        return [BlockNode.from_dict(item) for item in data if isinstance(item, Mapping)]
    raise BlockTreeError(
        f"Block tree must be a JSON object or array, got {type(data).__name__}"
    )


def load_blocks_file(path: str | Path) -> list[BlockNode]:
    """Read and parse a JSON block tree file."""
    return load_blocks(Path(path).read_text(encoding="utf-8"))
