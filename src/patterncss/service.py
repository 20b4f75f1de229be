"""PatternCSSService: generate layout CSS for a stored post's content."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Callable, Protocol

from patterncss.engine.processor import TreeProcessor
from patterncss.model.block import BlockNode
from patterncss.model.context import RenderMode

logger = logging.getLogger(__name__)

BlockParser = Callable[[str], Iterable[BlockNode | Mapping[str, Any]]]


class ContentSource(Protocol):
    """Looks up the raw content of a post."""

    def get_content(self, post_id: int) -> str | None: ...


class InMemoryContentSource:
    """Dict-backed content source."""

    def __init__(self, posts: dict[int, str] | None = None) -> None:
        self._posts: dict[int, str] = dict(posts or {})

    def add(self, post_id: int, content: str) -> None:
        self._posts[post_id] = content

    def get_content(self, post_id: int) -> str | None:
        return self._posts.get(post_id)


class PatternCSSService:
    """Fetches post content, parses it, and hands the tree to a TreeProcessor.

    Content lookup and parsing are the caller's collaborators; the service
    itself does no I/O beyond calling them.
    """

    def __init__(
        self,
        source: ContentSource,
        parser: BlockParser,
        processor: TreeProcessor | None = None,
    ) -> None:
        self.source = source
        self.parser = parser
        self.processor = processor or TreeProcessor()

    def generate_css_for_post(self, post_id: int, mode: RenderMode | None = None) -> str:
        """Return the layout CSS for a post, or ``""`` if it has no content."""
        if not post_id:
            return ""

        content = self.source.get_content(post_id)
        if not content:
            logger.debug("Post %s has no content", post_id)
            return ""

        blocks = self.parser(content)
        return self.processor.generate(blocks, mode)

    def generate_css_for_blocks(
        self,
        blocks: Iterable[BlockNode | Mapping[str, Any]],
        mode: RenderMode | None = None,
    ) -> str:
        return self.processor.generate(blocks, mode)
