"""Console reporter: renders run events with click styling."""

from __future__ import annotations

from typing import Any

import click

from unclassify.events.types import (
    ClassesHarvested,
    DocumentCleaned,
    DocumentParseDegraded,
    DocumentWriteFailed,
    DocumentWriteFallback,
    ElementCleaned,
    RunCompleted,
)


class ConsoleReporter:
    """Bus listener printing per-element, per-file and total lines."""

    def __init__(self, verbose: bool = False) -> None:
        self.verbose = verbose
        self._headed: set[str] = set()

    def __call__(self, event: Any) -> None:
        if isinstance(event, ClassesHarvested):
            if self.verbose:
                click.echo(
                    f"Found {event.count} classes: "
                    + click.style(", ".join(event.classes), fg="cyan")
                )
        elif isinstance(event, ElementCleaned):
            if event.document not in self._headed:
                self._headed.add(event.document)
                click.echo(click.style(event.document, underline=True))
            click.echo(
                click.style(f"{event.tag} .{' .'.join(event.classes)} - ", fg="bright_black")
                + click.style(" ".join(event.removed), fg="red")
            )
        elif isinstance(event, DocumentCleaned):
            if event.removed > 0:
                click.echo(
                    click.style("Removed ", fg="bright_black")
                    + click.style(str(event.removed), fg="red")
                    + click.style(" out of ", fg="bright_black")
                    + click.style(str(event.all), fg="blue")
                    + click.style(" classes.", fg="bright_black")
                )
                click.echo()
        elif isinstance(event, DocumentParseDegraded):
            click.echo(f"Warning: {event.document}: could not parse ({event.reason})", err=True)
        elif isinstance(event, DocumentWriteFallback):
            click.echo(f"Note: {event.document} written to {event.destination}", err=True)
        elif isinstance(event, DocumentWriteFailed):
            click.echo(f"Error: {event.reason}", err=True)
        elif isinstance(event, RunCompleted):
            self._total(event)

    @staticmethod
    def _total(event: RunCompleted) -> None:
        summary = event.summary
        banner = dict(bg="yellow", fg="black", bold=True)
        if summary.removed == 0:
            click.echo(click.style("[TOTAL] No classes removed.", **banner))
            return
        click.echo(
            click.style("Classes removed:", fg="bright_black")
            + " "
            + click.style(", ".join(summary.removed_classes), fg="bright_black")
        )
        click.echo()
        click.echo(
            click.style(
                f"[TOTAL] Removed {summary.removed} out of {summary.all} classes.", **banner
            )
        )
