from unclassify.engine.runner import (
    DocumentOutcome,
    build_classifier,
    clean_documents,
    run,
)
from unclassify.engine.sink import DocumentSink, FileSink, MemorySink, WriteReceipt

__all__ = [
    "run",
    "build_classifier",
    "clean_documents",
    "DocumentOutcome",
    "DocumentSink",
    "FileSink",
    "MemorySink",
    "WriteReceipt",
]
