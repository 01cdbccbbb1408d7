"""Source model: an identified piece of input text."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Source:
    """Input text paired with an identifier used in diagnostics.

    For files the identifier is the path the text was read from.
    """

    identifier: str
    text: str

    @classmethod
    def from_path(cls, path: str | Path, encoding: str = "utf-8") -> Source:
        """Read a file into a Source identified by its path."""
        return cls(identifier=str(path), text=Path(path).read_text(encoding=encoding))
