"""Round-trip helpers that keep untouched markup as it was written.

``html.parser`` decodes character references while parsing, and bs4's
formatters escape ``<``, ``>`` and ``&`` on the way out. Either step alone
rewrites text the tool never meant to change: ``&nbsp;`` turns into a
literal character, ``data-bind="visible: n > 1"`` gains ``&gt;``, and
client-side template bodies are entity-escaped inside raw script text.

``AmpersandMask`` hides every ``&`` from the parser behind a private-use
character that does not occur in the document, so references survive the
parse untouched. ``PRESERVING_FORMATTER`` then writes text and attribute
values back exactly as parsed, keeping source attribute order.
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from bs4 import Tag
from bs4.formatter import HTMLFormatter

__all__ = ["AmpersandMask", "PRESERVING_FORMATTER", "PreservingFormatter"]

_PRIVATE_USE = range(0xE000, 0xF900)


class AmpersandMask:
    """Swap ``&`` for a stand-in character before parsing, and back after."""

    def __init__(self, text: str) -> None:
        self.token: Optional[str] = next(
            (chr(code) for code in _PRIVATE_USE if chr(code) not in text), None
        )

    def hide(self, text: str) -> str:
        return text.replace("&", self.token) if self.token else text

    def reveal(self, text: str) -> str:
        return text.replace(self.token, "&") if self.token else text


class PreservingFormatter(HTMLFormatter):
    """HTML formatter that performs no entity substitution.

    Attribute values are still quoted by bs4, which switches to single
    quotes (or ``&quot;``) when a value contains a double quote. Void
    elements are written without a closing slash.
    """

    def __init__(self) -> None:
        super().__init__(entity_substitution=None, void_element_close_prefix="")

    def attributes(self, tag: Tag) -> Iterable[Tuple[str, Optional[str]]]:
        if tag.attrs is None:
            return []
        return list(tag.attrs.items())


PRESERVING_FORMATTER = PreservingFormatter()
