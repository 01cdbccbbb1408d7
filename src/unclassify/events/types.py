"""Event types emitted during a run."""

from dataclasses import dataclass

from unclassify.model.stats import RunSummary


@dataclass(frozen=True)
class RunStarted:
    stylesheets: int
    documents: int


@dataclass(frozen=True)
class ClassesHarvested:
    count: int
    classes: tuple[str, ...]


@dataclass(frozen=True)
class ElementCleaned:
    document: str
    tag: str
    classes: tuple[str, ...]
    removed: tuple[str, ...]


@dataclass(frozen=True)
class DocumentCleaned:
    document: str
    removed: int
    kept: int
    destination: str | None = None

    @property
    def all(self) -> int:
        return self.removed + self.kept


@dataclass(frozen=True)
class DocumentParseDegraded:
    document: str
    reason: str


@dataclass(frozen=True)
class DocumentWriteFallback:
    document: str
    destination: str


@dataclass(frozen=True)
class DocumentWriteFailed:
    document: str
    reason: str


@dataclass(frozen=True)
class RunCompleted:
    summary: RunSummary
