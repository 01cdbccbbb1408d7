"""Template guard for ``<script type="text/html">`` blocks.

HTML parsers treat script content as raw text, so class attributes inside
client-side templates (knockout and friends) would be invisible. Before
parsing, the tag name of each such block is swapped for a placeholder so
its markup is parsed like any other element. After serialisation, the
placeholder is swapped back by plain text substitution.

The placeholder is long and namespaced so it cannot collide with a real
tag or occur in ordinary text.
"""

from __future__ import annotations

import re

__all__ = ["PLACEHOLDER_TAG", "escape_templates", "restore_templates"]

PLACEHOLDER_TAG = "unclassify-template-script"

_TEMPLATE_RE = re.compile(
    r"""
    <(?P<open>script)       # opening tag name
    (?P<attrs>\b[^>]*text/html[^>]*)>
    (?P<body>.*?)           # template markup, non-greedy
    </(?P<close>script)     # closing tag name
    """,
    re.IGNORECASE | re.DOTALL | re.VERBOSE,
)


def _escape(match: re.Match[str]) -> str:
    return (
        f"<{PLACEHOLDER_TAG}{match.group('attrs')}>"
        f"{match.group('body')}</{PLACEHOLDER_TAG}"
    )


def escape_templates(html: str) -> str:
    """Rename every text/html script block to the placeholder tag."""
    return _TEMPLATE_RE.sub(_escape, html)


def restore_templates(html: str) -> str:
    """Rename every placeholder tag back to ``script``."""
    return html.replace(PLACEHOLDER_TAG, "script")
