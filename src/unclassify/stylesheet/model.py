"""Stylesheet model: StyleRule, GroupRule, AtStatement, and Stylesheet dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class StyleRule:
    """A qualified rule such as ``.nav a, .footer { ... }``.

    Only the selector list is retained; declarations play no part in
    class harvesting.
    """

    selectors: tuple[str, ...]


@dataclass(frozen=True)
class GroupRule:
    """An at-rule with a block, e.g. ``@media (min-width: 1px) { ... }``.

    ``rules`` holds the rules found inside the block. Blocks that only
    contain declarations (``@font-face``, ``@page``) have no rules.
    """

    name: str  # at-keyword without "@", e.g. "media", "supports"
    prelude: str  # text between the keyword and the block
    rules: tuple[Rule, ...] = ()


@dataclass(frozen=True)
class AtStatement:
    """A block-less at-rule such as ``@import url(a.css);``."""

    name: str
    prelude: str


Rule = Union[StyleRule, GroupRule, AtStatement]


@dataclass(frozen=True)
class Stylesheet:
    """A parsed stylesheet: the top-level rules in source order."""

    rules: tuple[Rule, ...] = ()

    def style_rules(self) -> list[StyleRule]:
        """Return top-level style rules plus those nested one level in groups."""
        found: list[StyleRule] = []
        for rule in self.rules:
            if isinstance(rule, StyleRule):
                found.append(rule)
            elif isinstance(rule, GroupRule):
                found.extend(r for r in rule.rules if isinstance(r, StyleRule))
        return found
