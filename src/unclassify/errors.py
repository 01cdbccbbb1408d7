"""Error types raised by unclassify."""

from __future__ import annotations


class UnclassifyError(Exception):
    """Base class for all unclassify errors."""


class StylesheetParseError(UnclassifyError):
    """Raised when stylesheet source cannot be parsed.

    ``line`` and ``column`` are 1-based and relative to ``source`` when the
    error could be traced back to a single input stylesheet.
    """

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        source: str | None = None,
    ):
        self.message = message
        self.line = line
        self.column = column
        self.source = source
        super().__init__(message)

    def __str__(self) -> str:
        parts = [self.source] if self.source else []
        if self.line is not None:
            parts.append(str(self.line))
            if self.column is not None:
                parts.append(str(self.column))
        location = ":".join(parts)
        first_line = self.message.strip().splitlines()[0] if self.message.strip() else ""
        return f"{location}: {first_line}" if location else first_line


class ConfigurationError(UnclassifyError):
    """Raised when run options have an unsupported shape or name."""


class DocumentWriteError(UnclassifyError):
    """Raised when a rewritten document cannot be written to any destination."""

    def __init__(self, identifier: str, destination: str, reason: str = ""):
        self.identifier = identifier
        self.destination = destination
        self.reason = reason
        message = f"Could not write {identifier!r} to {destination!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
