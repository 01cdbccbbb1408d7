"""Render bus events as standard logging records."""

from __future__ import annotations

import logging
from typing import Any, Callable

from unclassify.events.types import (
    ClassesHarvested,
    DocumentCleaned,
    DocumentParseDegraded,
    DocumentWriteFailed,
    DocumentWriteFallback,
    ElementCleaned,
    RunCompleted,
    RunStarted,
)


def logging_listener(logger: logging.Logger | None = None) -> Callable[[Any], None]:
    """Create a bus listener that logs every event at a fitting level."""
    log = logger or logging.getLogger("unclassify")

    def listener(event: Any) -> None:
        if isinstance(event, RunStarted):
            log.info(
                "Run started: stylesheets=%d documents=%d",
                event.stylesheets,
                event.documents,
            )
        elif isinstance(event, ClassesHarvested):
            log.debug("Found %d classes: %s", event.count, ", ".join(event.classes))
        elif isinstance(event, ElementCleaned):
            log.debug(
                "%s: %s .%s - %s",
                event.document,
                event.tag,
                " .".join(event.classes),
                " ".join(event.removed),
            )
        elif isinstance(event, DocumentCleaned):
            log.info(
                "%s: removed %d out of %d classes",
                event.document,
                event.removed,
                event.all,
            )
        elif isinstance(event, DocumentParseDegraded):
            log.warning("%s: parse degraded: %s", event.document, event.reason)
        elif isinstance(event, DocumentWriteFallback):
            log.warning("%s: written to fallback %s", event.document, event.destination)
        elif isinstance(event, DocumentWriteFailed):
            log.error("%s: write failed: %s", event.document, event.reason)
        elif isinstance(event, RunCompleted):
            summary = event.summary
            log.info(
                "Run completed: removed %d out of %d classes (%d failure(s))",
                summary.removed,
                summary.all,
                len(summary.failures),
            )

    return listener
