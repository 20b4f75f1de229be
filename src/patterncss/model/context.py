"""Generation context: the render mode and the selector scope it implies."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from patterncss.config import DEFAULT_CONFIG, PatternCSSConfig


class RenderMode(str, Enum):
    """Where the generated CSS will be used."""

    NORMAL = "normal"
    PREVIEW = "preview"


@dataclass(frozen=True)
class GenerationContext:
    """Ambient, read-only settings for one generation pass."""

    is_preview_scope: bool = False
    base_selector: str = "body"

    @classmethod
    def for_mode(
        cls, mode: RenderMode, config: PatternCSSConfig = DEFAULT_CONFIG
    ) -> GenerationContext:
        if mode is RenderMode.PREVIEW:
            return cls(is_preview_scope=True, base_selector=config.preview_selector)
        return cls(is_preview_scope=False, base_selector=config.document_selector)

    @property
    def mode(self) -> RenderMode:
        return RenderMode.PREVIEW if self.is_preview_scope else RenderMode.NORMAL
