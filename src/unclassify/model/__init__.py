from unclassify.model.source import Source
from unclassify.model.stats import (
    DocumentFailure,
    FileStats,
    FileSummary,
    RunStats,
    RunSummary,
)

__all__ = [
    "Source",
    "FileStats",
    "FileSummary",
    "DocumentFailure",
    "RunStats",
    "RunSummary",
]
