"""CLI command: patterncss inspect -- show which generator styles each block."""

from __future__ import annotations

import sys

import click

from patterncss.engine.processor import TreeProcessor
from patterncss.model.block import BlockNode
from patterncss.model.context import RenderMode
from patterncss.parser import BlockTreeError, load_blocks_file


@click.command()
@click.argument("blockfile", type=click.Path(exists=True, dir_okay=False))
def inspect(blockfile: str) -> None:
    """Parse a JSON block tree and display its structure.

    Each block is listed with the generator that claims it, followed by the
    rule count and CSS size it contributes on its own.
    """
    try:
        blocks = load_blocks_file(blockfile)
    except BlockTreeError as exc:
        click.echo(f"Block tree error: {exc}", err=True)
        sys.exit(1)

    processor = TreeProcessor()
    context = processor.resolver.resolve(RenderMode.NORMAL)

    total = sum(1 for root in blocks for _ in root.walk())
    click.echo(f"Blocks: {total}")
    click.echo()

    def show(node: BlockNode, depth: int) -> None:
        indent = "  " * (depth + 1)
        if not node.name:
            click.echo(f"{indent}(freeform)")
        else:
            generator = processor.registry.resolve(node.name)
            if generator is None:
                click.echo(f"{indent}{node.name}  generator=none")
            else:
                css = processor.generate_node(node, context)
                line = f"{indent}{node.name}  generator={generator.name}"
                build_rules = getattr(generator, "build_rules", None)
                if build_rules is not None and css:
                    line += f"  rules={len(build_rules(node, context).rules)}"
                click.echo(f"{line}  css={len(css)} chars")
        for child in node.children:
            show(child, depth + 1)

    for root in blocks:
        show(root, 0)
