"""unclassify: remove CSS classes from HTML that no stylesheet defines."""
from __future__ import annotations

__version__ = "0.4.0"

from unclassify.classifier import ClassificationConfig, Classifier, Verdict  # noqa: E402
from unclassify.config import UnclassifyConfig, load_config  # noqa: E402
from unclassify.engine import MemorySink, run  # noqa: E402
from unclassify.model import RunSummary, Source  # noqa: E402

__all__ = [
    "__version__",
    "UnclassifyConfig",
    "load_config",
    "Classifier",
    "ClassificationConfig",
    "Verdict",
    "MemorySink",
    "RunSummary",
    "Source",
    "run",
]
