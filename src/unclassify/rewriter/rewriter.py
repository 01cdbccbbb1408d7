"""Markup rewriter: strip unknown classes from one HTML document."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from bs4 import BeautifulSoup, ParserRejectedMarkup, Tag

from unclassify.classifier import Classifier
from unclassify.model.stats import FileStats
from unclassify.rewriter.serializer import PRESERVING_FORMATTER, AmpersandMask
from unclassify.rewriter.template_guard import escape_templates, restore_templates

__all__ = ["ElementRecord", "RewriteResult", "rewrite_document"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ElementRecord:
    """One element that lost at least one class."""

    tag: str
    classes: tuple[str, ...]  # original class list
    removed: tuple[str, ...]

    def __str__(self) -> str:
        return f"{self.tag} .{' .'.join(self.classes)} - {' '.join(self.removed)}"


@dataclass
class RewriteResult:
    """Rewritten text plus what happened along the way."""

    text: str
    stats: FileStats = field(default_factory=FileStats)
    records: list[ElementRecord] = field(default_factory=list)
    degraded: str = ""  # reason the parser rejected the markup, if it did

    @property
    def changed(self) -> bool:
        return self.stats.removed > 0


def _has_class(tag: Tag) -> bool:
    return tag.has_attr("class")


def rewrite_document(
    text: str,
    classifier: Classifier,
    *,
    template_guard: bool = False,
    identifier: str = "",
) -> RewriteResult:
    """Remove every class the classifier rejects from *text*.

    Elements left with no classes lose the attribute entirely. Everything
    else, character references included, is written back as it was read.
    When the parser rejects the markup outright, the text is returned
    unchanged with ``degraded`` set and zero stats.
    """
    markup = escape_templates(text) if template_guard else text
    mask = AmpersandMask(markup)

    try:
        # The class attribute is kept as a raw string and split here.
        soup = BeautifulSoup(mask.hide(markup), "html.parser", multi_valued_attributes=None)
    except ParserRejectedMarkup as exc:
        logger.warning("%s: markup rejected by parser: %s", identifier or "<document>", exc)
        return RewriteResult(text=text, degraded=str(exc) or "markup rejected")

    result = RewriteResult(text=text)
    for element in soup.find_all(_has_class):
        classes = mask.reveal(str(element["class"])).split()
        kept, removed = classifier.classify_all(classes)
        result.stats.add(len(kept), removed)

        if kept:
            element["class"] = mask.hide(" ".join(kept))
        else:
            del element["class"]

        if removed:
            record = ElementRecord(tag=element.name, classes=tuple(classes), removed=tuple(removed))
            result.records.append(record)
            logger.debug("%s: %s", identifier or "<document>", record)

    output = mask.reveal(soup.decode(formatter=PRESERVING_FORMATTER))
    result.text = restore_templates(output) if template_guard else output
    return result
