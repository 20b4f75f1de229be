"""patterncss model layer -- public type re-exports."""

from patterncss.model.block import BlockNode
from patterncss.model.context import GenerationContext, RenderMode

__all__ = [
    "BlockNode",
    "GenerationContext",
    "RenderMode",
]
