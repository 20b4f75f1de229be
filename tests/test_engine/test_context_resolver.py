"""Tests for render-mode resolution."""

from __future__ import annotations

from patterncss.config import PatternCSSConfig
from patterncss.engine.context import ContextResolver
from patterncss.model import GenerationContext, RenderMode


def spectra_get_v3_blocks_css_for_preview(resolver: ContextResolver) -> GenerationContext:
    """Named like a preview entry point so stack inference picks it up."""
    return resolver.resolve()


def render_post(resolver: ContextResolver) -> GenerationContext:
    return resolver.resolve()


class TestExplicitMode:
    def test_normal(self):
        ctx = ContextResolver().resolve(RenderMode.NORMAL)
        assert ctx == GenerationContext(is_preview_scope=False, base_selector="body")

    def test_preview(self):
        ctx = ContextResolver().resolve(RenderMode.PREVIEW)
        assert ctx == GenerationContext(is_preview_scope=True, base_selector=".st-block-container")

    def test_string_mode_accepted(self):
        assert ContextResolver().resolve("preview").is_preview_scope  # type: ignore[arg-type]

    def test_explicit_mode_beats_stack(self):
        def spectra_get_v3_blocks_css_for_preview() -> GenerationContext:
            return ContextResolver().resolve(RenderMode.NORMAL)

        assert spectra_get_v3_blocks_css_for_preview().is_preview_scope is False


class TestStackInference:
    def test_default_is_normal(self):
        assert render_post(ContextResolver()).is_preview_scope is False

    def test_preview_marker_in_call_chain(self):
        ctx = spectra_get_v3_blocks_css_for_preview(ContextResolver())
        assert ctx.is_preview_scope is True
        assert ctx.base_selector == ".st-block-container"

    def test_nested_marker(self):
        def spectra_process_blocks_for_comprehensive_css() -> GenerationContext:
            return render_post(ContextResolver())

        assert spectra_process_blocks_for_comprehensive_css().is_preview_scope is True

    def test_custom_markers(self):
        config = PatternCSSConfig(preview_markers=("render_post",))
        assert render_post(ContextResolver(config)).is_preview_scope is True

    def test_marker_beyond_depth_ignored(self):
        config = PatternCSSConfig(stack_depth=1)

        def spectra_get_v3_blocks_css_for_preview() -> GenerationContext:
            return render_post(ContextResolver(config))

        assert spectra_get_v3_blocks_css_for_preview().is_preview_scope is False

    def test_infer_mode(self):
        assert ContextResolver().infer_mode() is RenderMode.NORMAL
