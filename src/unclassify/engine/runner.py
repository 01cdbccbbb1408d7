"""Run orchestration: harvest classes once, then clean every document."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterable, Sequence

from unclassify.allowlist import static_classes
from unclassify.classifier import ClassificationConfig, Classifier, resolve_js_prefixes
from unclassify.config import UnclassifyConfig
from unclassify.engine.sink import DocumentSink, FileSink, WriteReceipt
from unclassify.errors import ConfigurationError, DocumentWriteError
from unclassify.events import (
    ClassesHarvested,
    DocumentCleaned,
    DocumentParseDegraded,
    DocumentWriteFailed,
    DocumentWriteFallback,
    ElementCleaned,
    EventBus,
    RunCompleted,
    RunStarted,
)
from unclassify.model.source import Source
from unclassify.model.stats import RunStats, RunSummary
from unclassify.rewriter import RewriteResult, rewrite_document
from unclassify.stylesheet import aggregate_stylesheets, harvest_classes

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DocumentOutcome:
    """Result of processing one document on a worker."""

    source: Source
    result: RewriteResult
    receipt: WriteReceipt | None = None
    write_error: str = ""


def _check_config(config: UnclassifyConfig) -> None:
    if config.filter is not None and not callable(config.filter):
        raise ConfigurationError("filter must be callable")
    if not isinstance(config.jobs, int) or config.jobs < 1:
        raise ConfigurationError(f"jobs must be a positive integer, got {config.jobs!r}")


def build_classifier(
    stylesheets: Sequence[Source],
    config: UnclassifyConfig,
    bus: EventBus | None = None,
) -> Classifier:
    """Build the run's classifier from stylesheets and configuration.

    Configuration is validated before any stylesheet is parsed, so a bad
    preset name fails fast. StylesheetParseError propagates to the caller.
    """
    _check_config(config)
    extra = static_classes(config.custom_classes, config.presets)
    js_prefixes = resolve_js_prefixes(config.js_classes)

    stylesheet = aggregate_stylesheets(stylesheets, separator=config.separator)
    allowed = harvest_classes(stylesheet) | extra

    logger.info("Found %d classes in %d stylesheet(s)", len(allowed), len(stylesheets))
    if bus is not None:
        bus.emit(ClassesHarvested(count=len(allowed), classes=tuple(sorted(allowed))))

    return Classifier(
        ClassificationConfig(
            allowed=allowed,
            predicate=config.filter,
            js_prefixes=js_prefixes,
        )
    )


def _process(
    source: Source,
    classifier: Classifier,
    config: UnclassifyConfig,
    sink: DocumentSink,
) -> DocumentOutcome:
    result = rewrite_document(
        source.text,
        classifier,
        template_guard=config.knockout,
        identifier=source.identifier,
    )
    try:
        receipt = sink.write(source.identifier, result.text)
    except DocumentWriteError as exc:
        return DocumentOutcome(source=source, result=result, write_error=str(exc))
    return DocumentOutcome(source=source, result=result, receipt=receipt)


def _report(outcome: DocumentOutcome, stats: RunStats, bus: EventBus | None) -> None:
    """Fold one outcome into the run stats and emit its events."""
    identifier = outcome.source.identifier
    result = outcome.result

    def emit(event: object) -> None:
        if bus is not None:
            bus.emit(event)

    if result.degraded:
        emit(DocumentParseDegraded(document=identifier, reason=result.degraded))
        stats.record_failure(identifier, f"parse degraded: {result.degraded}")
        return
    if outcome.write_error:
        logger.error("%s", outcome.write_error)
        emit(DocumentWriteFailed(document=identifier, reason=outcome.write_error))
        stats.record_failure(identifier, outcome.write_error)
        return

    receipt = outcome.receipt
    destination = receipt.destination if receipt else None
    if receipt is not None and receipt.fallback and destination:
        stats.record_fallback(identifier, destination)
        emit(DocumentWriteFallback(document=identifier, destination=destination))

    for record in result.records:
        emit(
            ElementCleaned(
                document=identifier,
                tag=record.tag,
                classes=record.classes,
                removed=record.removed,
            )
        )
    stats.merge(identifier, result.stats, destination=destination)
    emit(
        DocumentCleaned(
            document=identifier,
            removed=result.stats.removed,
            kept=result.stats.kept,
            destination=destination,
        )
    )


def clean_documents(
    documents: Sequence[Source],
    classifier: Classifier,
    config: UnclassifyConfig,
    sink: DocumentSink,
    bus: EventBus | None = None,
    stats: RunStats | None = None,
) -> RunStats:
    """Rewrite and write every document, accumulating into *stats*.

    With ``config.jobs > 1`` documents are rewritten and written on a thread
    pool. Outcomes are folded into the stats in input order either way.
    Per-document write failures and parse rejections are recorded, never
    raised.
    """
    stats = stats if stats is not None else RunStats()

    def work(source: Source) -> DocumentOutcome:
        return _process(source, classifier, config, sink)

    outcomes: Iterable[DocumentOutcome]
    if config.jobs > 1 and len(documents) > 1:
        with ThreadPoolExecutor(max_workers=min(config.jobs, len(documents))) as pool:
            outcomes = list(pool.map(work, documents))
    else:
        outcomes = map(work, documents)

    for outcome in outcomes:
        _report(outcome, stats, bus)
    return stats


def run(
    stylesheets: Sequence[Source],
    documents: Sequence[Source],
    config: UnclassifyConfig,
    sink: DocumentSink | None = None,
    bus: EventBus | None = None,
) -> RunSummary:
    """Execute a full run and return its summary.

    Raises ConfigurationError or StylesheetParseError before any document
    is touched.
    """
    if sink is None:
        sink = FileSink.from_config(config)
    if bus is not None:
        bus.emit(RunStarted(stylesheets=len(stylesheets), documents=len(documents)))

    classifier = build_classifier(stylesheets, config, bus)
    stats = clean_documents(documents, classifier, config, sink, bus)

    summary = stats.finalize()
    logger.info("Removed %d out of %d classes", summary.removed, summary.all)
    if bus is not None:
        bus.emit(RunCompleted(summary=summary))
    return summary
