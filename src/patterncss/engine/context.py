"""ContextResolver: decides the render mode for a generation pass."""

from __future__ import annotations

import inspect
import logging

from patterncss.config import DEFAULT_CONFIG, PatternCSSConfig
from patterncss.model.context import GenerationContext, RenderMode

logger = logging.getLogger(__name__)


class ContextResolver:
    """Builds the GenerationContext for one top-level call.

    Callers should pass an explicit :class:`RenderMode`. When they do not,
    the resolver falls back to inspecting the call stack for one of
    ``config.preview_markers``; that fallback is deprecated and only kept
    so callers written before the ``mode`` argument behave as before.
    """

    def __init__(self, config: PatternCSSConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    def resolve(self, mode: RenderMode | None = None) -> GenerationContext:
        if mode is None:
            mode = self.infer_mode()
        return GenerationContext.for_mode(RenderMode(mode), self.config)

    def infer_mode(self) -> RenderMode:
        """Deprecated: look for a preview entry point among the calling frames."""
        markers = set(self.config.preview_markers)
        frame = inspect.currentframe()
        try:
            caller = frame.f_back if frame is not None else None
            depth = 0
            while caller is not None and depth < self.config.stack_depth:
                if caller.f_code.co_name in markers:
                    logger.debug(
                        "Preview mode inferred from caller %s", caller.f_code.co_name
                    )
                    return RenderMode.PREVIEW
                caller = caller.f_back
                depth += 1
        finally:
            del frame
        return RenderMode.NORMAL
