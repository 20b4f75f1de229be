"""patterncss CLI entry point: Click group with subcommands."""

import logging

import click

from patterncss import __version__


@click.group()
@click.version_option(version=__version__, prog_name="patterncss")
@click.option("--verbose", "-v", is_flag=True, help="Log generator dispatch to stderr")
def cli(verbose: bool) -> None:
    """patterncss - layout CSS generation for parsed block trees."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from patterncss.cli.generate import generate  # noqa: E402
from patterncss.cli.inspect import inspect  # noqa: E402

cli.add_command(generate)
cli.add_command(inspect)
