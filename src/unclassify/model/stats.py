"""Stats model: per-file and run-level counts of removed and kept classes."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Iterable


@dataclass
class FileStats:
    """Mutable counts for one document.

    ``removed_classes`` keeps distinct names in first-seen order.
    """

    removed: int = 0
    kept: int = 0
    removed_classes: dict[str, None] = field(default_factory=dict)

    @property
    def all(self) -> int:
        return self.removed + self.kept

    def add(self, kept: int, removed: Iterable[str]) -> None:
        """Record the outcome of one element: a kept count and the removed names."""
        self.kept += kept
        for name in removed:
            self.removed += 1
            self.removed_classes.setdefault(name, None)


@dataclass(frozen=True)
class FileSummary:
    """Final counts for one document."""

    identifier: str
    removed: int
    kept: int
    removed_classes: tuple[str, ...] = ()
    destination: str | None = None

    @property
    def all(self) -> int:
        return self.removed + self.kept


@dataclass(frozen=True)
class DocumentFailure:
    """A non-fatal, per-document problem recorded during a run."""

    identifier: str
    reason: str


@dataclass(frozen=True)
class RunSummary:
    """Immutable totals for a finished run."""

    removed: int = 0
    kept: int = 0
    removed_classes: tuple[str, ...] = ()
    files: tuple[FileSummary, ...] = ()
    failures: tuple[DocumentFailure, ...] = ()
    fallbacks: tuple[tuple[str, str], ...] = ()  # (identifier, destination)

    @property
    def all(self) -> int:
        return self.removed + self.kept

    @property
    def ok(self) -> bool:
        """True when every document was processed and written."""
        return not self.failures


class RunStats:
    """Run-level accumulator.

    All public methods are protected by a lock so documents processed on
    worker threads can be merged safely.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._removed = 0
        self._kept = 0
        self._removed_classes: dict[str, None] = {}
        self._files: list[FileSummary] = []
        self._failures: list[DocumentFailure] = []
        self._fallbacks: list[tuple[str, str]] = []

    @property
    def removed(self) -> int:
        with self._lock:
            return self._removed

    @property
    def kept(self) -> int:
        with self._lock:
            return self._kept

    @property
    def all(self) -> int:
        with self._lock:
            return self._removed + self._kept

    def merge(
        self, identifier: str, stats: FileStats, destination: str | None = None
    ) -> FileSummary:
        """Add one document's counts to the run totals."""
        summary = FileSummary(
            identifier=identifier,
            removed=stats.removed,
            kept=stats.kept,
            removed_classes=tuple(stats.removed_classes),
            destination=destination,
        )
        with self._lock:
            self._removed += stats.removed
            self._kept += stats.kept
            for name in stats.removed_classes:
                self._removed_classes.setdefault(name, None)
            self._files.append(summary)
        return summary

    def record_failure(self, identifier: str, reason: str) -> None:
        """Record a document that contributes zero processed classes."""
        with self._lock:
            self._failures.append(DocumentFailure(identifier=identifier, reason=reason))
            self._files.append(FileSummary(identifier=identifier, removed=0, kept=0))

    def record_fallback(self, identifier: str, destination: str) -> None:
        with self._lock:
            self._fallbacks.append((identifier, destination))

    def finalize(self) -> RunSummary:
        """Return an immutable snapshot of the accumulated totals."""
        with self._lock:
            return RunSummary(
                removed=self._removed,
                kept=self._kept,
                removed_classes=tuple(self._removed_classes),
                files=tuple(self._files),
                failures=tuple(self._failures),
                fallbacks=tuple(self._fallbacks),
            )
