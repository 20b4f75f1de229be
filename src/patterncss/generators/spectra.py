"""Generator for the Spectra custom block family (``spectra/*``)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from patterncss.generators.base import lookup, scalar, text
from patterncss.model.block import BlockNode
from patterncss.model.context import GenerationContext
from patterncss.stylesheet.builder import RuleBuilder

BASE_KEY = "spectra_layout"

FLEX_BLOCKS = ("container", "buttons", "icons", "accordion")

JUSTIFY_CONTENT: dict[str, dict[str, str]] = {
    "center": {"justify-content": "center"},
    "right": {"justify-content": "flex-end"},
    "space-between": {"justify-content": "space-between"},
    "stretch": {"align-items": "stretch"},
    "left": {"justify-content": "flex-start"},
}

VERTICAL_ALIGNMENT: dict[str, dict[str, str]] = {
    "center": {"align-items": "center"},
    "bottom": {"align-items": "flex-end"},
    "top": {"align-items": "flex-start"},
}


def base_css(base_selector: str) -> str:
    flex_selectors = ",\n".join(
        f"{base_selector} .wp-block-spectra-{kind}.is-layout-flex" for kind in FLEX_BLOCKS
    )
    return (
        "\n/* Spectra Layout Support CSS */\n"
        f"{flex_selectors} {{\n    display: flex;\n}}\n"
        f"{base_selector} .wp-block-spectra-container.is-layout-grid {{\n    display: grid;\n}}\n"
    )


class SpectraBlockGenerator:
    """Flex and grid layout CSS driven by a block's ``layout`` attribute.

    Every ``spectra/*`` block is treated alike; the block class is derived
    from the name (``spectra/container`` -> ``.wp-block-spectra-container``).
    """

    name = "spectra"
    prefix = "spectra/"

    def can_handle(self, block_name: str) -> bool:
        return block_name.startswith(self.prefix)

    def generate_css(self, block: BlockNode, context: GenerationContext) -> str:
        return self.build_rules(block, context).build()

    def build_rules(self, block: BlockNode, context: GenerationContext) -> RuleBuilder:
        """Return the populated builder for *block*, before serialization."""
        builder = RuleBuilder()
        builder.add_base_once(BASE_KEY, base_css(context.base_selector))
        self._layout(builder, block)
        return builder

    def _layout(self, builder: RuleBuilder, block: BlockNode) -> None:
        layout = block.get_mapping("layout")
        layout_type = layout.get("type")
        if not layout_type:
            return

        block_class = ".wp-block-" + block.name.replace("/", "-")
        if layout_type == "flex":
            self._flex(builder, block_class, layout)
        elif layout_type == "grid":
            self._grid(builder, block_class, layout)

        gap = scalar(block.get_mapping("style.spacing"), "blockGap")
        if gap is not None:
            builder.add_rule(
                f"{block_class}-is-layout-flex,\n{block_class}-is-layout-grid",
                {"gap": gap},
            )

    def _flex(self, builder: RuleBuilder, block_class: str, layout: Mapping[str, Any]) -> None:
        orientation = text(layout, "orientation")
        if orientation is not None:
            direction = "column" if orientation == "vertical" else "row"
            builder.add_rule(f"{block_class}.is-{orientation}", {"flex-direction": direction})

        wrap = scalar(layout, "flexWrap")
        if wrap is not None:
            builder.add_rule(f"{block_class}.is-flex-wrap-{wrap}", {"flex-wrap": wrap})

        justify = text(layout, "justifyContent")
        if justify is not None:
            builder.add_rule(
                f"{block_class}.is-content-justification-{justify}",
                lookup(JUSTIFY_CONTENT, justify, "left"),
            )

        align = text(layout, "verticalAlignment")
        if align is not None:
            builder.add_rule(
                f"{block_class}.is-vertical-alignment-{align}",
                lookup(VERTICAL_ALIGNMENT, align, "top"),
            )

    def _grid(self, builder: RuleBuilder, block_class: str, layout: Mapping[str, Any]) -> None:
        columns = scalar(layout, "columnCount")
        if columns is not None:
            builder.add_rule(
                f"{block_class}.has-{columns}-columns",
                {"grid-template-columns": f"repeat({columns}, 1fr)"},
            )

        min_width = scalar(layout, "minimumColumnWidth")
        if min_width is not None:
            builder.add_rule(
                f"{block_class}.has-min-column-width",
                {"grid-template-columns": f"repeat(auto-fit, minmax({min_width}, 1fr))"},
            )
