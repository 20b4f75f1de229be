from __future__ import annotations

from dataclasses import dataclass

PREVIEW_MARKERS: tuple[str, ...] = (
    "spectra_get_v3_blocks_css_for_preview",
    "spectra_get_comprehensive_responsive_css_for_post",
    "spectra_process_blocks_for_comprehensive_css",
)


@dataclass(frozen=True)
class PatternCSSConfig:
    document_selector: str = "body"
    preview_selector: str = ".st-block-container"
    preview_markers: tuple[str, ...] = PREVIEW_MARKERS
    stack_depth: int = 10  # frames inspected by the stack-based mode fallback
    gap_container_count: int = 10  # numbered wp-container-* classes that receive blockGap


DEFAULT_CONFIG = PatternCSSConfig()
