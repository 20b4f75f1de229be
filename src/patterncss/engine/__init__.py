"""Generation engine: generator registry, context resolution, and tree walking."""

from patterncss.engine.context import ContextResolver
from patterncss.engine.processor import TreeProcessor, as_blocks
from patterncss.engine.registry import GeneratorRegistry

__all__ = [
    "ContextResolver",
    "GeneratorRegistry",
    "TreeProcessor",
    "as_blocks",
]
