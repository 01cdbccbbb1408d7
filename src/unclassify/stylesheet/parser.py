"""Lark-based stylesheet parser and the stylesheet aggregator.

Only the block structure of CSS is understood. Selector lists are split on
top-level commas and kept as raw text for the class harvester.
"""

from __future__ import annotations

import functools
import re
from pathlib import Path
from typing import Sequence

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedEOF, UnexpectedInput

from unclassify.errors import StylesheetParseError
from unclassify.model.source import Source
from unclassify.stylesheet.model import AtStatement, GroupRule, StyleRule, Stylesheet

__all__ = ["aggregate_stylesheets", "parse_stylesheet", "split_selectors"]

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)

_RULE_TYPES = (StyleRule, GroupRule, AtStatement)


def split_selectors(prelude: str) -> tuple[str, ...]:
    """Split a selector list on commas that are not nested or quoted."""
    text = _COMMENT_RE.sub(" ", prelude)
    selectors: list[str] = []
    depth = 0
    quote = ""
    current: list[str] = []
    chars = iter(text)
    for ch in chars:
        if quote:
            current.append(ch)
            if ch == "\\":
                current.append(next(chars, ""))
            elif ch == quote:
                quote = ""
            continue
        if ch == "\\":
            current.append(ch)
            current.append(next(chars, ""))
        elif ch in "\"'":
            quote = ch
            current.append(ch)
        elif ch in "([":
            depth += 1
            current.append(ch)
        elif ch in ")]":
            depth = max(depth - 1, 0)
            current.append(ch)
        elif ch == "," and depth == 0:
            selectors.append("".join(current).strip())
            current = []
        else:
            current.append(ch)
    selectors.append("".join(current).strip())
    return tuple(s for s in selectors if s)


class StylesheetTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into Stylesheet model objects."""

    def qualified_rule(self, items: list[object]) -> StyleRule:
        # Nested rules and declarations inside a style rule are dropped.
        return StyleRule(selectors=split_selectors(str(items[0])))

    def group_rule(self, items: list[object]) -> GroupRule:
        name, prelude = self._at_header(items)
        rules = tuple(item for item in items if isinstance(item, _RULE_TYPES))
        return GroupRule(name=name, prelude=prelude, rules=rules)

    def at_statement(self, items: list[object]) -> AtStatement:
        name, prelude = self._at_header(items)
        return AtStatement(name=name, prelude=prelude)

    def declaration(self, items: list[object]) -> None:
        return None

    def last_declaration(self, items: list[object]) -> None:
        return None

    def start(self, items: list[object]) -> Stylesheet:
        return Stylesheet(rules=tuple(item for item in items if isinstance(item, _RULE_TYPES)))

    @staticmethod
    def _at_header(items: list[object]) -> tuple[str, str]:
        name = str(items[0])[1:].lower()
        prelude = ""
        if len(items) > 1 and isinstance(items[1], Token) and items[1].type == "PRELUDE":
            prelude = _COMMENT_RE.sub(" ", str(items[1])).strip()
        return name, prelude


@functools.lru_cache(maxsize=None)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


def parse_stylesheet(source: str) -> Stylesheet:
    """Parse stylesheet text into a Stylesheet.

    Raises StylesheetParseError with the 1-based line and column of the
    offending input when the text is not well-formed.
    """
    try:
        tree = _parser().parse(source)
    except UnexpectedEOF as e:
        line = source.count("\n") + 1
        column = len(source) - (source.rfind("\n") + 1) + 1
        raise StylesheetParseError(
            "Unexpected end of stylesheet (unclosed block?)", line=line, column=column
        ) from e
    except UnexpectedInput as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise StylesheetParseError(
            str(e),
            line=line if isinstance(line, int) and line > 0 else None,
            column=column if isinstance(column, int) and column > 0 else None,
        ) from e
    return StylesheetTransformer().transform(tree)


def aggregate_stylesheets(sources: Sequence[Source], separator: str = "\n") -> Stylesheet:
    """Concatenate stylesheet sources in order and parse the result.

    The separator is inserted between consecutive sources only. A parse
    error is re-attributed to the source containing the offending line.
    """
    combined = separator.join(source.text for source in sources)
    try:
        return parse_stylesheet(combined)
    except StylesheetParseError as exc:
        if exc.line is not None and sources:
            _attribute_error(exc, combined, sources, separator)
        raise


def _attribute_error(
    exc: StylesheetParseError,
    combined: str,
    sources: Sequence[Source],
    separator: str,
) -> None:
    """Rewrite exc.line/column/source relative to the owning source."""
    offset = 0
    owner = 0
    owner_offset = 0
    for index, source in enumerate(sources):
        start_line = combined.count("\n", 0, offset) + 1
        if start_line > exc.line:  # type: ignore[operator]
            break
        owner, owner_offset = index, offset
        offset += len(source.text) + len(separator)

    start_line = combined.count("\n", 0, owner_offset) + 1
    line = exc.line - start_line + 1  # type: ignore[operator]
    if line == 1 and exc.column is not None:
        line_start = combined.rfind("\n", 0, owner_offset) + 1
        exc.column = max(exc.column - (owner_offset - line_start), 1)
    exc.line = line
    exc.source = sources[owner].identifier
