"""Class classifier: decide whether a class token is kept or removed.

A token is kept when any of the following holds:

- it is in the allowed-class set;
- the user filter returns ``False`` for it. Note the polarity: the filter
  names classes to *remove*, and returning ``False`` marks a class as valid;
- JavaScript hook checking is enabled and it starts with a hook prefix.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Optional, Union

from unclassify.errors import ConfigurationError

__all__ = [
    "DEFAULT_JS_PREFIX",
    "ClassFilter",
    "ClassificationConfig",
    "Classifier",
    "Verdict",
    "resolve_js_prefixes",
]

DEFAULT_JS_PREFIX = "js-"

ClassFilter = Callable[[str, frozenset], bool]
JsClassesSpec = Optional[Union[bool, str, Iterable[str]]]


class Verdict(Enum):
    """Outcome of classifying a single class token."""

    KEEP = "keep"
    REMOVE = "remove"


def resolve_js_prefixes(spec: JsClassesSpec) -> tuple[str, ...]:
    """Normalise a JavaScript hook spec into a tuple of prefixes.

    ``True`` means the single prefix ``"js-"``; ``False``/``None`` disables
    hook checking and yields an empty tuple.
    """
    if spec is True:
        return (DEFAULT_JS_PREFIX,)
    if spec is False or spec is None:
        return ()
    if isinstance(spec, str):
        return tuple(spec.split())
    if isinstance(spec, (list, tuple)):
        if not all(isinstance(p, str) for p in spec):
            raise ConfigurationError("js_classes prefixes must be strings")
        return tuple(p for p in spec if p)
    raise ConfigurationError(
        f"js_classes must be a bool or a list of prefixes, got {type(spec).__name__}"
    )


@dataclass(frozen=True)
class ClassificationConfig:
    """Everything the classifier needs. Immutable for the length of a run."""

    allowed: frozenset[str]
    predicate: Optional[ClassFilter] = None
    js_prefixes: tuple[str, ...] = (DEFAULT_JS_PREFIX,)

    @property
    def js_hooks_enabled(self) -> bool:
        return bool(self.js_prefixes)


class Classifier:
    """Memoising classifier bound to one ClassificationConfig.

    Tokens repeat across elements and documents, so verdicts are cached per
    token. Since the config never changes, the cache key is effectively
    ``(token, config)``. Concurrent callers may race to fill an entry but
    always compute the same verdict.
    """

    def __init__(self, config: ClassificationConfig) -> None:
        self.config = config
        self._cache: dict[str, Verdict] = {}

    @property
    def allowed(self) -> frozenset[str]:
        return self.config.allowed

    def classify(self, token: str) -> Verdict:
        """Return KEEP or REMOVE for *token*."""
        verdict = self._cache.get(token)
        if verdict is None:
            verdict = self._decide(token)
            self._cache[token] = verdict
        return verdict

    def is_kept(self, token: str) -> bool:
        return self.classify(token) is Verdict.KEEP

    def classify_all(self, tokens: Iterable[str]) -> tuple[list[str], list[str]]:
        """Split *tokens* into (kept, removed), preserving their order."""
        kept: list[str] = []
        removed: list[str] = []
        for token in tokens:
            if self.classify(token) is Verdict.KEEP:
                kept.append(token)
            else:
                removed.append(token)
        return kept, removed

    def _decide(self, token: str) -> Verdict:
        config = self.config
        if token in config.allowed:
            return Verdict.KEEP
        if config.predicate is not None and config.predicate(token, config.allowed) is False:
            return Verdict.KEEP
        if config.js_prefixes and token.startswith(config.js_prefixes):
            return Verdict.KEEP
        return Verdict.REMOVE
