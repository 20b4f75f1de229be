"""CLI command: patterncss generate -- print the CSS for a JSON block tree."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from patterncss.engine.processor import TreeProcessor
from patterncss.model.context import RenderMode
from patterncss.parser import BlockTreeError, load_blocks_file


@click.command()
@click.argument("blockfile", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--preview/--normal",
    default=False,
    help="Scope base CSS to the pattern preview container instead of the document",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write CSS to this file instead of stdout",
)
def generate(blockfile: str, preview: bool, output: str | None) -> None:
    """Generate layout CSS for a parsed block tree stored as JSON.

    BLOCKFILE holds the output of the block parser: a list of blocks with
    blockName, attrs and innerBlocks.
    """
    try:
        blocks = load_blocks_file(blockfile)
    except BlockTreeError as exc:
        location = f" (line {exc.line}, column {exc.column})" if exc.line else ""
        click.echo(f"Block tree error: {exc}{location}", err=True)
        sys.exit(1)

    mode = RenderMode.PREVIEW if preview else RenderMode.NORMAL
    css = TreeProcessor().generate(blocks, mode)

    if output:
        Path(output).write_text(css, encoding="utf-8")
        click.echo(f"Wrote {len(css)} characters to {output}")
    else:
        click.echo(css, nl=False)
