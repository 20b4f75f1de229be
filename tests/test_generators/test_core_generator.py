"""Tests for the WordPress core layout generator."""

from __future__ import annotations

import pytest

from patterncss.config import PatternCSSConfig
from patterncss.generators.core import BASE_KEY, CoreBlockGenerator, base_css
from patterncss.model import BlockNode, GenerationContext, RenderMode

NORMAL = GenerationContext.for_mode(RenderMode.NORMAL)
PREVIEW = GenerationContext.for_mode(RenderMode.PREVIEW)


def _css(name: str, attrs: dict | None = None, context: GenerationContext = NORMAL) -> str:
    return CoreBlockGenerator().generate_css(BlockNode(name, attrs or {}), context)


def _rule(selector: str, **props: str) -> str:
    body = "".join(f"    {k.replace('_', '-')}: {v};\n" for k, v in props.items())
    return f"{selector} {{\n{body}}}\n"


# ---------------------------------------------------------------------------
# can_handle / base CSS
# ---------------------------------------------------------------------------


class TestCanHandle:
    @pytest.mark.parametrize("name", ["core/group", "core/cover", "core/"])
    def test_core_namespace(self, name):
        assert CoreBlockGenerator().can_handle(name) is True

    @pytest.mark.parametrize("name", ["spectra/container", "group", "my-core/group", ""])
    def test_other_namespaces(self, name):
        assert CoreBlockGenerator().can_handle(name) is False

    def test_supported_blocks(self):
        assert CoreBlockGenerator().supported_blocks == (
            "core/group",
            "core/columns",
            "core/column",
            "core/image",
            "core/gallery",
        )


class TestBaseCss:
    def test_always_emitted_first(self):
        css = _css("core/paragraph")
        assert css == base_css("body")
        assert css.startswith("\n/* WordPress Core Layout CSS */\n")

    def test_emitted_once_per_call(self):
        css = _css("core/group", {"layout": {"type": "flex"}})
        assert css.count("WordPress Core Layout CSS") == 1

    def test_scoped_to_base_selector(self):
        assert "body .is-layout-flex {" in _css("core/paragraph")
        preview = _css("core/paragraph", context=PREVIEW)
        assert ".st-block-container .is-layout-flex {" in preview
        assert ".st-block-container .is-layout-grid {" in preview
        assert "body " not in preview

    def test_base_key_name(self):
        assert BASE_KEY == "wordpress_core_layout"


# ---------------------------------------------------------------------------
# core/group
# ---------------------------------------------------------------------------


class TestGroup:
    def test_vertical_flex_centered(self):
        css = _css(
            "core/group",
            {"layout": {"type": "flex", "orientation": "vertical", "justifyContent": "center"}},
        )
        assert _rule(".wp-block-group.is-vertical", flex_direction="column") in css
        assert _rule(".wp-block-group.is-content-justification-center", align_items="center") in css
        assert _rule(".is-content-justification-center", align_items="center") in css

    def test_rule_order(self):
        css = _css("core/group", {"layout": {"type": "flex", "orientation": "vertical"}})
        assert css.index(".wp-block-group.is-vertical") < css.index(
            ".wp-block-group.is-content-justification-left"
        )
        assert css.rstrip().endswith(_rule(".wp-block-group-is-layout-flex", display="flex").rstrip())

    def test_justification_defaults_to_left(self):
        css = _css("core/group", {"layout": {"type": "flex"}})
        assert _rule(".wp-block-group.is-content-justification-left", align_items="flex-start") in css

    @pytest.mark.parametrize(
        "value,prop,expected",
        [
            ("right", "align-items", "flex-end"),
            ("space-between", "justify-content", "space-between"),
        ],
    )
    def test_justification_table(self, value, prop, expected):
        css = _css("core/group", {"layout": {"type": "flex", "justifyContent": value}})
        assert f".wp-block-group.is-content-justification-{value} {{\n    {prop}: {expected};" in css

    def test_unmapped_justification_uses_left_entry(self):
        css = _css("core/group", {"layout": {"type": "flex", "justifyContent": "diagonal"}})
        assert _rule(".wp-block-group.is-content-justification-diagonal", align_items="flex-start") in css

    def test_horizontal_has_no_vertical_rule(self):
        css = _css("core/group", {"layout": {"type": "flex", "orientation": "horizontal"}})
        assert "is-vertical" not in css

    def test_non_flex_layout_skips_flex_rules(self):
        css = _css("core/group", {"layout": {"type": "constrained"}})
        assert "is-content-justification" not in css
        assert _rule(".wp-block-group-is-layout-flex", display="flex") in css

    def test_block_gap_targets_numbered_containers(self):
        css = _css("core/group", {"style": {"spacing": {"blockGap": "2rem"}}})
        selectors = ",\n".join(f".wp-container-core-group-is-layout-{i}" for i in range(1, 11))
        assert _rule(selectors, gap="2rem") in css

    def test_gap_container_count_configurable(self):
        gen = CoreBlockGenerator(PatternCSSConfig(gap_container_count=2))
        css = gen.generate_css(BlockNode("core/group", {"style": {"spacing": {"blockGap": "1px"}}}), NORMAL)
        assert ".wp-container-core-group-is-layout-2 {" in css
        assert "is-layout-3" not in css

    def test_per_side_block_gap_ignored(self):
        css = _css("core/group", {"style": {"spacing": {"blockGap": {"top": "1rem"}}}})
        assert ".wp-container-core-group" not in css

    def test_malformed_layout_is_harmless(self):
        css = _css("core/group", {"layout": "flex", "style": ["bad"]})
        assert css.endswith(_rule(".wp-block-group-is-layout-flex", display="flex"))


# ---------------------------------------------------------------------------
# core/columns, core/column
# ---------------------------------------------------------------------------


class TestColumns:
    def test_columns_always_flex(self):
        css = _css("core/columns")
        assert _rule(".wp-block-columns", display="flex", flex_wrap="wrap") in css
        assert "is-stacked-on-mobile" not in css

    def test_stacked_on_mobile(self):
        css = _css("core/columns", {"isStackedOnMobile": True})
        assert _rule(".wp-block-columns.is-stacked-on-mobile", flex_direction="column") in css

    def test_not_stacked_when_false(self):
        assert "is-stacked-on-mobile" not in _css("core/columns", {"isStackedOnMobile": False})

    def test_column_width(self):
        css = _css("core/column", {"width": "33.33%"})
        assert _rule(".wp-block-column", flex_basis="33.33%", flex_grow="0") in css

    def test_column_without_width(self):
        assert _css("core/column") == base_css("body")


# ---------------------------------------------------------------------------
# core/image, core/gallery
# ---------------------------------------------------------------------------


class TestImage:
    def test_center_alignment(self):
        assert _rule(".wp-block-image.aligncenter", text_align="center") in _css(
            "core/image", {"align": "center"}
        )

    def test_left_and_right_alignment(self):
        assert _rule(".wp-block-image.alignleft", margin_right="1em") in _css("core/image", {"align": "left"})
        assert _rule(".wp-block-image.alignright", margin_left="1em") in _css("core/image", {"align": "right"})

    def test_unknown_alignment_emits_nothing(self):
        assert "alignwide" not in _css("core/image", {"align": "wide"})

    def test_dimensions(self):
        css = _css("core/image", {"width": 640, "height": "auto"})
        assert _rule(".wp-block-image img", width="640", height="auto") in css

    def test_width_only(self):
        assert _rule(".wp-block-image img", width="50%") in _css("core/image", {"width": "50%"})

    def test_no_attributes(self):
        assert _css("core/image") == base_css("body")


class TestGallery:
    def test_columns(self):
        css = _css("core/gallery", {"columns": 3})
        assert _rule(".wp-block-gallery.has-3-columns", grid_template_columns="repeat(3, 1fr)") in css

    def test_integral_float_columns_written_as_int(self):
        css = _css("core/gallery", {"columns": 3.0})
        assert _rule(".wp-block-gallery.has-3-columns", grid_template_columns="repeat(3, 1fr)") in css
        assert "3.0" not in css

    def test_string_columns_trusted_verbatim(self):
        css = _css("core/gallery", {"columns": "5"})
        assert ".wp-block-gallery.has-5-columns" in css

    def test_no_columns(self):
        assert "has-" not in _css("core/gallery")


# ---------------------------------------------------------------------------
# Generic core blocks
# ---------------------------------------------------------------------------


class TestGenericLayout:
    def test_flex_layout(self):
        css = _css("core/buttons", {"layout": {"type": "flex", "orientation": "vertical"}})
        assert _rule(".wp-block-buttons.is-layout-flex", display="flex") in css
        assert _rule(".wp-block-buttons.is-vertical", flex_direction="column") in css

    def test_non_flex_layout(self):
        assert _css("core/cover", {"layout": {"type": "constrained"}}) == base_css("body")

    def test_no_layout(self):
        assert _css("core/paragraph", {"content": "hi"}) == base_css("body")


# ---------------------------------------------------------------------------
# build_rules
# ---------------------------------------------------------------------------


class TestBuildRules:
    def test_gallery_rules_exclude_base(self):
        builder = CoreBlockGenerator().build_rules(
            BlockNode("core/gallery", {"columns": 3}), NORMAL
        )
        assert builder.has_base(BASE_KEY)
        assert [rule.selector for rule in builder.rules] == [".wp-block-gallery.has-3-columns"]
        assert builder.rules[0].properties == {"grid-template-columns": "repeat(3, 1fr)"}

    def test_generate_css_serializes_builder(self):
        block = BlockNode("core/group", {"layout": {"type": "flex", "orientation": "vertical"}})
        gen = CoreBlockGenerator()
        assert gen.generate_css(block, NORMAL) == gen.build_rules(block, NORMAL).build()
        assert len(gen.build_rules(block, NORMAL).rules) == 4

    def test_unknown_core_block_has_no_rules(self):
        builder = CoreBlockGenerator().build_rules(BlockNode("core/paragraph"), NORMAL)
        assert builder.rules == ()
        assert builder.build() == base_css("body")
