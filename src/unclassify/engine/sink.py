"""Output sinks for rewritten documents."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from unclassify.config import UnclassifyConfig
from unclassify.errors import ConfigurationError, DocumentWriteError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WriteReceipt:
    """Where a document ended up. ``destination`` is None when nothing was written."""

    destination: str | None
    fallback: bool = False


class DocumentSink(Protocol):
    """Receives the rewritten text of each document."""

    def write(self, identifier: str, text: str) -> WriteReceipt: ...


class FileSink:
    """Write rewritten documents to disk.

    - ``dry``: nothing is written.
    - ``overwrite``: the source file is replaced in place.
    - otherwise the text goes to ``dest``; if that fails it goes to
      ``dest/<source file name>`` instead. A dest ending in a slash
      is a directory: documents are written inside it directly.
    """

    def __init__(
        self, dest: str | None = None, overwrite: bool = False, dry: bool = False
    ) -> None:
        if not (dry or overwrite or dest):
            raise ConfigurationError("a dest is required unless overwrite or dry is set")
        self.dest = dest
        self.overwrite = overwrite
        self.dry = dry

    @classmethod
    def from_config(cls, config: UnclassifyConfig) -> FileSink:
        return cls(dest=config.dest, overwrite=config.overwrite, dry=config.dry)

    def write(self, identifier: str, text: str) -> WriteReceipt:
        if self.dry:
            return WriteReceipt(destination=None)
        if self.overwrite:
            self._write(Path(identifier), text, identifier)
            return WriteReceipt(destination=identifier)

        primary = Path(self.dest)  # type: ignore[arg-type]
        if self.dest.endswith(("/", "\\")):  # type: ignore[union-attr]
            target = primary / Path(identifier).name
            self._write(target, text, identifier)
            return WriteReceipt(destination=str(target))

        try:
            primary.parent.mkdir(parents=True, exist_ok=True)
            primary.write_text(text, encoding="utf-8")
            return WriteReceipt(destination=str(primary))
        except OSError as exc:
            logger.info("%s: cannot write %s (%s), using fallback", identifier, primary, exc)

        fallback = primary / Path(identifier).name
        self._write(fallback, text, identifier)
        return WriteReceipt(destination=str(fallback), fallback=True)

    @staticmethod
    def _write(path: Path, text: str, identifier: str) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise DocumentWriteError(identifier, str(path), str(exc)) from exc


class MemorySink:
    """Collect rewritten documents in memory, keyed by identifier."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.outputs: dict[str, str] = {}

    def write(self, identifier: str, text: str) -> WriteReceipt:
        with self._lock:
            self.outputs[identifier] = text
        return WriteReceipt(destination=identifier)

    def __getitem__(self, identifier: str) -> str:
        return self.outputs[identifier]
