"""CLI command: unclassify clean -- strip unused classes from HTML files."""

from __future__ import annotations

import glob
import logging
import sys
from pathlib import Path
from typing import Any, Iterable

import click
from click.core import ParameterSource

from unclassify.config import UnclassifyConfig, load_config, resolve_filter
from unclassify.engine import FileSink, run
from unclassify.errors import ConfigurationError, StylesheetParseError
from unclassify.events import EventBus, logging_listener
from unclassify.cli.report import ConsoleReporter
from unclassify.model.source import Source

_PRESET_FLAGS = ("bootstrap", "foundation", "html5bp")


def expand_paths(patterns: Iterable[str]) -> list[str]:
    """Expand glob patterns, keeping literal paths that match nothing."""
    paths: list[str] = []
    for pattern in patterns:
        matches = sorted(glob.glob(pattern, recursive=True))
        if matches:
            paths.extend(m for m in matches if m not in paths)
        elif pattern not in paths:
            paths.append(pattern)
    return paths


def read_sources(patterns: Iterable[str]) -> list[Source]:
    """Read every existing file; warn about and skip the rest."""
    sources: list[Source] = []
    for path in expand_paths(patterns):
        if not Path(path).is_file():
            click.echo(f'Source file "{path}" not found.', err=True)
            continue
        sources.append(Source.from_path(path))
    return sources


def _given(ctx: click.Context, name: str) -> bool:
    """True when the option was set explicitly rather than left at its default."""
    return ctx.get_parameter_source(name) not in (None, ParameterSource.DEFAULT)


def build_config(ctx: click.Context, config_path: str | None, **options: Any) -> UnclassifyConfig:
    """Load the optional config file, then apply options given on the command line."""
    config = load_config(config_path) if config_path else UnclassifyConfig()

    overrides: dict[str, Any] = {}
    presets: dict[str, bool] = {}
    for name, value in options.items():
        if not _given(ctx, name):
            continue
        if name in _PRESET_FLAGS:
            presets[name] = value
        elif name == "js_prefixes":
            overrides["js_classes"] = list(value)
        elif name == "filter_spec":
            overrides["filter"] = resolve_filter(value)
        elif name == "stylesheets":
            overrides["stylesheets"] = tuple(value)
        else:
            overrides[name] = value
    if presets:
        overrides["presets"] = presets
    return config.merged(**overrides)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@click.command()
@click.argument("html", nargs=-1, required=True)
@click.option(
    "-s", "--stylesheet", "stylesheets", multiple=True,
    help="Stylesheet file or glob (repeatable).",
)
@click.option(
    "--config", "config_path", type=click.Path(exists=True, dir_okay=False),
    help="JSON configuration file.",
)
@click.option("--custom-classes", help="Whitespace-separated classes to always keep.")
@click.option(
    "--js-classes/--no-js-classes", default=True,
    help="Keep classes with a JavaScript hook prefix (default js-).",
)
@click.option(
    "--js-prefix", "js_prefixes", multiple=True,
    help="JavaScript hook prefix to keep (repeatable, replaces js-).",
)
@click.option("--bootstrap/--no-bootstrap", default=False, help="Keep Bootstrap state classes.")
@click.option("--foundation/--no-foundation", default=False, help="Keep Foundation state classes.")
@click.option("--html5bp/--no-html5bp", default=False, help="Keep HTML5 Boilerplate classes.")
@click.option("--filter", "filter_spec", help="Filter as module:function; returning False keeps a class.")
@click.option("--knockout/--no-knockout", default=False, help="Clean <script type=\"text/html\"> templates.")
@click.option("--separator", default="\n", help="Text inserted between concatenated stylesheets.")
@click.option("--overwrite/--no-overwrite", default=False, help="Rewrite HTML files in place.")
@click.option("--dest", help="Output file, or directory when it ends with a slash.")
@click.option("--dry/--no-dry", default=False, help="Report only; write nothing.")
@click.option("-j", "--jobs", type=click.IntRange(min=1), default=1, help="Documents processed in parallel.")
@click.option("-v", "--verbose", is_flag=True, help="List harvested classes and debug logs.")
@click.pass_context
def clean(
    ctx: click.Context,
    html: tuple[str, ...],
    config_path: str | None,
    verbose: bool,
    **options: Any,
) -> None:
    """Remove classes from HTML files that no stylesheet defines.

    Exits with code 1 on configuration or stylesheet errors. Per-file
    problems are reported but do not change the exit code.
    """
    configure_logging(verbose)
    try:
        config = build_config(ctx, config_path, **options)
        sink = FileSink.from_config(config)
    except ConfigurationError as exc:
        click.echo(f"Configuration error: {exc}", err=True)
        sys.exit(1)

    stylesheets = read_sources(config.stylesheets)
    documents = read_sources(html)

    bus = EventBus()
    bus.on_all(ConsoleReporter(verbose=verbose))
    if verbose:
        bus.on_all(logging_listener())
    try:
        run(stylesheets, documents, config, sink=sink, bus=bus)
    except ConfigurationError as exc:
        click.echo(f"Configuration error: {exc}", err=True)
        sys.exit(1)
    except StylesheetParseError as exc:
        click.echo(f"Stylesheet error: {exc}", err=True)
        sys.exit(1)

    if config.dry:
        click.echo(click.style("DRY mode on. No files written.", bg="red", fg="white"))
