"""Generator for WordPress core layout blocks (``core/*``)."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable

from patterncss.config import DEFAULT_CONFIG, PatternCSSConfig
from patterncss.generators.base import lookup, scalar, text
from patterncss.model.block import BlockNode
from patterncss.model.context import GenerationContext
from patterncss.stylesheet.builder import RuleBuilder

logger = logging.getLogger(__name__)

BASE_KEY = "wordpress_core_layout"

# Flex justification for core/group. Note right/left move align-items,
# not justify-content.
JUSTIFICATION: dict[str, dict[str, str]] = {
    "center": {"align-items": "center"},
    "right": {"align-items": "flex-end"},
    "space-between": {"justify-content": "space-between"},
    "left": {"align-items": "flex-start"},
}

IMAGE_ALIGNMENT: dict[str, dict[str, str]] = {
    "center": {"text-align": "center"},
    "left": {"margin-right": "1em"},
    "right": {"margin-left": "1em"},
}


def base_css(base_selector: str) -> str:
    return (
        "\n/* WordPress Core Layout CSS */\n"
        f"{base_selector} .is-layout-flex {{\n    display: flex;\n}}\n"
        ".is-layout-flex {\n    flex-wrap: wrap;\n    align-items: center;\n}\n"
        f"{base_selector} .is-layout-grid {{\n    display: grid;\n}}\n"
        ".is-layout-grid {\n"
        "    grid-template-columns: repeat(auto-fit, minmax(12rem, 1fr));\n"
        "    gap: 1.25rem;\n"
        "}\n"
    )


class CoreBlockGenerator:
    """Layout CSS for ``core/group``, ``core/columns``, ``core/column``,
    ``core/image`` and ``core/gallery``.

    Any other ``core/*`` block that declares a ``layout`` gets the generic
    flex rules for its ``.wp-block-<name>`` class.
    """

    name = "core"
    prefix = "core/"

    def __init__(self, config: PatternCSSConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        self._dispatch: dict[str, Callable[[RuleBuilder, BlockNode], None]] = {
            "core/group": self._group,
            "core/columns": self._columns,
            "core/column": self._column,
            "core/image": self._image,
            "core/gallery": self._gallery,
        }

    @property
    def supported_blocks(self) -> tuple[str, ...]:
        return tuple(self._dispatch)

    def can_handle(self, block_name: str) -> bool:
        return block_name.startswith(self.prefix)

    def generate_css(self, block: BlockNode, context: GenerationContext) -> str:
        return self.build_rules(block, context).build()

    def build_rules(self, block: BlockNode, context: GenerationContext) -> RuleBuilder:
        """Return the populated builder for *block*, before serialization."""
        builder = RuleBuilder()
        builder.add_base_once(BASE_KEY, base_css(context.base_selector))

        handler = self._dispatch.get(block.name)
        if handler is not None:
            handler(builder, block)
        else:
            self._generic_layout(builder, block)
        return builder

    # --- core/group -----------------------------------------------------------

    def _group(self, builder: RuleBuilder, block: BlockNode) -> None:
        layout = block.get_mapping("layout")
        if layout.get("type") == "flex":
            self._flex_layout(builder, layout, "wp-block-group")

        gap = scalar(block.get_mapping("style.spacing"), "blockGap")
        if gap is not None:
            selectors = [
                f".wp-container-core-group-is-layout-{i}"
                for i in range(1, self.config.gap_container_count + 1)
            ]
            builder.add_rule(",\n".join(selectors), {"gap": gap})

        builder.add_rule(".wp-block-group-is-layout-flex", {"display": "flex"})

    def _flex_layout(
        self, builder: RuleBuilder, layout: Mapping[str, Any], block_class: str
    ) -> None:
        if layout.get("orientation") == "vertical":
            builder.add_rule(f".{block_class}.is-vertical", {"flex-direction": "column"})

        justify = text(layout, "justifyContent") or "left"
        props = lookup(JUSTIFICATION, justify, "left")
        builder.add_rule(f".{block_class}.is-content-justification-{justify}", props)
        builder.add_rule(f".is-content-justification-{justify}", props)

    # --- core/columns, core/column --------------------------------------------

    def _columns(self, builder: RuleBuilder, block: BlockNode) -> None:
        builder.add_rule(".wp-block-columns", {"display": "flex", "flex-wrap": "wrap"})
        if block.get("isStackedOnMobile"):
            builder.add_rule(
                ".wp-block-columns.is-stacked-on-mobile", {"flex-direction": "column"}
            )

    def _column(self, builder: RuleBuilder, block: BlockNode) -> None:
        width = scalar(block.attributes, "width")
        if width is not None:
            builder.add_rule(".wp-block-column", {"flex-basis": width, "flex-grow": "0"})

    # --- core/image, core/gallery ---------------------------------------------

    def _image(self, builder: RuleBuilder, block: BlockNode) -> None:
        align = text(block.attributes, "align")
        if align is not None:
            builder.add_rule(f".wp-block-image.align{align}", IMAGE_ALIGNMENT.get(align, {}))

        builder.add_rule(
            ".wp-block-image img",
            {"width": block.get("width"), "height": block.get("height")},
        )

    def _gallery(self, builder: RuleBuilder, block: BlockNode) -> None:
        columns = scalar(block.attributes, "columns")
        if columns is not None:
            builder.add_rule(
                f".wp-block-gallery.has-{columns}-columns",
                {"grid-template-columns": f"repeat({columns}, 1fr)"},
            )

    # --- everything else ------------------------------------------------------

    def _generic_layout(self, builder: RuleBuilder, block: BlockNode) -> None:
        layout = block.get("layout")
        if not isinstance(layout, Mapping):
            return

        block_class = ".wp-block-" + block.name.replace(self.prefix, "", 1)
        logger.debug("Generic layout rules for %s", block.name)
        if layout.get("type") == "flex":
            builder.add_rule(f"{block_class}.is-layout-flex", {"display": "flex"})
            if layout.get("orientation") == "vertical":
                builder.add_rule(f"{block_class}.is-vertical", {"flex-direction": "column"})
