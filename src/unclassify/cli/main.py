"""unclassify CLI entry point: Click group with subcommands."""

import click

from unclassify import __version__


@click.group()
@click.version_option(version=__version__, prog_name="unclassify")
def cli() -> None:
    """unclassify - remove unused CSS classes from your HTML."""


# Import and register subcommands
from unclassify.cli.clean import clean  # noqa: E402
from unclassify.cli.classes import classes  # noqa: E402

cli.add_command(clean)
cli.add_command(classes)
