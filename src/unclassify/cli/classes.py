"""CLI command: unclassify classes -- list the classes a run would keep."""

from __future__ import annotations

import sys
from typing import Any

import click

from unclassify.cli.clean import build_config, read_sources
from unclassify.engine import build_classifier
from unclassify.errors import ConfigurationError, StylesheetParseError


@click.command()
@click.option(
    "-s", "--stylesheet", "stylesheets", multiple=True,
    help="Stylesheet file or glob (repeatable).",
)
@click.option(
    "--config", "config_path", type=click.Path(exists=True, dir_okay=False),
    help="JSON configuration file.",
)
@click.option("--custom-classes", help="Whitespace-separated classes to always keep.")
@click.option("--bootstrap/--no-bootstrap", default=False, help="Include Bootstrap state classes.")
@click.option("--foundation/--no-foundation", default=False, help="Include Foundation state classes.")
@click.option("--html5bp/--no-html5bp", default=False, help="Include HTML5 Boilerplate classes.")
@click.option("--separator", default="\n", help="Text inserted between concatenated stylesheets.")
@click.pass_context
def classes(ctx: click.Context, config_path: str | None, **options: Any) -> None:
    """Print every allowed class, one per line, sorted.

    The list is the union of classes found in the stylesheets and any
    custom or preset classes.
    """
    try:
        config = build_config(ctx, config_path, **options)
        stylesheets = read_sources(config.stylesheets)
        classifier = build_classifier(stylesheets, config)
    except ConfigurationError as exc:
        click.echo(f"Configuration error: {exc}", err=True)
        sys.exit(1)
    except StylesheetParseError as exc:
        click.echo(f"Stylesheet error: {exc}", err=True)
        sys.exit(1)

    for name in sorted(classifier.allowed):
        click.echo(name)
