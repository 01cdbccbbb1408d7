"""Class harvester: collect every class name referenced by stylesheet selectors.

Selectors are scanned textually. Combinators, pseudo-classes and attribute
selectors are not interpreted, so ``:not(.ignored)`` still yields
``ignored`` and ``[href$=".pdf"]`` yields ``pdf``.
"""

from __future__ import annotations

import functools
import re

from unclassify.stylesheet.model import Stylesheet

__all__ = ["CLASS_RE", "classes_in_selector", "harvest_classes"]

CLASS_RE = re.compile(r"\.-?[_a-zA-Z]+[_a-zA-Z0-9-]*")


@functools.lru_cache(maxsize=None)
def classes_in_selector(selector: str) -> tuple[str, ...]:
    """Return the class names in *selector*, in order, without the leading dot."""
    return tuple(match[1:] for match in CLASS_RE.findall(selector))


def harvest_classes(stylesheet: Stylesheet) -> frozenset[str]:
    """Return the distinct class names used by the stylesheet's selectors.

    Covers top-level style rules and style rules nested one level deep
    inside grouping at-rules such as ``@media``.
    """
    classes: set[str] = set()
    for rule in stylesheet.style_rules():
        for selector in rule.selectors:
            classes.update(classes_in_selector(selector))
    return frozenset(classes)
