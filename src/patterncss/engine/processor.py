"""TreeProcessor: walks a block forest and concatenates per-block CSS."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from patterncss.config import DEFAULT_CONFIG, PatternCSSConfig
from patterncss.engine.context import ContextResolver
from patterncss.engine.registry import GeneratorRegistry
from patterncss.events import types as events
from patterncss.events.bus import EventBus
from patterncss.model.block import BlockNode
from patterncss.model.context import GenerationContext, RenderMode

logger = logging.getLogger(__name__)


def as_blocks(blocks: Iterable[BlockNode | Mapping[str, Any]]) -> list[BlockNode]:
    """Coerce parsed dicts to BlockNodes, dropping anything that is neither."""
    nodes: list[BlockNode] = []
    for block in blocks:
        if isinstance(block, BlockNode):
            nodes.append(block)
        elif isinstance(block, Mapping):
            nodes.append(BlockNode.from_dict(block))
    return nodes


class TreeProcessor:
    """Generates CSS for every block in a tree.

    Output order is depth-first: a block's own CSS, then its inner blocks'
    CSS, siblings in document order. Generation is best-effort: a block no
    generator claims contributes nothing, and a generator that raises is
    logged and skipped rather than failing the whole tree.
    Event listeners are held to the same rule: one that raises is logged
    and the walk continues.
    """

    def __init__(
        self,
        registry: GeneratorRegistry | None = None,
        *,
        config: PatternCSSConfig | None = None,
        resolver: ContextResolver | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        if registry is None:
            from patterncss.generators import create_default_registry

            registry = create_default_registry(self.config)
        self.registry = registry
        self.resolver = resolver or ContextResolver(self.config)
        self.event_bus = event_bus or EventBus()

    def generate(
        self,
        blocks: Iterable[BlockNode | Mapping[str, Any]],
        mode: RenderMode | None = None,
    ) -> str:
        """Return the concatenated CSS for *blocks* and all their descendants.

        ``mode`` should be given explicitly; when omitted it is inferred
        from the call stack (see :class:`ContextResolver`).
        """
        context = self.resolver.resolve(mode)
        self._emit(
            events.GenerationStarted(mode=context.mode, base_selector=context.base_selector)
        )
        nodes = as_blocks(blocks)
        css = self._process(nodes, context)
        self._emit(
            events.GenerationCompleted(
                blocks=sum(1 for node in nodes for _ in node.walk()),
                css_length=len(css),
            )
        )
        return css

    def _process(self, blocks: Iterable[BlockNode], context: GenerationContext) -> str:
        css = ""
        for block in blocks:
            css += self.generate_node(block, context)
            if block.children:
                css += self._process(block.children, context)
        return css

    def generate_node(self, block: BlockNode, context: GenerationContext) -> str:
        """Return the CSS for *block* alone; its children are not visited."""
        if not block.name:
            self._emit(events.BlockSkipped(block_name="", reason="unnamed"))
            return ""

        generator = self.registry.resolve(block.name)
        if generator is None:
            self._emit(events.BlockSkipped(block_name=block.name, reason="unclaimed"))
            return ""

        generator_name = getattr(generator, "name", type(generator).__name__)
        try:
            css = generator.generate_css(block, context)
        except Exception as exc:
            logger.warning(
                "Generator %s failed on %s: %s", generator_name, block.name, exc, exc_info=True
            )
            self._emit(
                events.GeneratorFailed(
                    block_name=block.name, generator=generator_name, error=str(exc)
                )
            )
            return ""

        logger.debug("Styled %s with %s (%d chars)", block.name, generator_name, len(css))
        self._emit(
            events.BlockStyled(block_name=block.name, generator=generator_name, css_length=len(css))
        )
        return css

    def _emit(self, event: Any) -> None:
        try:
            self.event_bus.emit(event)
        except Exception as exc:
            logger.warning(
                "Event listener failed on %s: %s", type(event).__name__, exc, exc_info=True
            )
