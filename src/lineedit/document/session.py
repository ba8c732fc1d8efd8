"""In-memory document session: append, render, save, load, clear."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from lineedit.config.schema import EditorConfig
from lineedit.document.errors import AlreadyEmpty, DocumentIOError, EmptyDocument
from lineedit.document.storage import DEFAULT_EXTENSION, read_lines, resolve_save_path, write_lines

logger = logging.getLogger(__name__)


@dataclass
class SaveResult:
    lines: int
    path: Path


class DocumentSession:
    """Holds one ordered sequence of text lines for the lifetime of a session."""

    def __init__(
        self,
        default_extension: str = DEFAULT_EXTENSION,
        encoding: str = "utf-8",
        encoding_errors: str = "surrogateescape",
    ) -> None:
        self.default_extension = default_extension
        self.encoding = encoding
        self.encoding_errors = encoding_errors
        self._lines: list[str] = []

    @classmethod
    def from_config(cls, config: EditorConfig) -> DocumentSession:
        """Create a session using the editor section of the configuration."""
        return cls(
            default_extension=config.default_extension,
            encoding=config.encoding,
            encoding_errors=config.encoding_errors,
        )

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def append_lines(self, lines: Iterable[str]) -> int:
        """Append lines until the first empty one. Returns count appended.

        Each line is appended as soon as it is read, so a lazy source can
        consult ``line_count`` between items.
        """
        added = 0
        for line in lines:
            if line == "":
                break
            self._lines.append(line)
            added += 1
        logger.debug("Appended %d line(s), total %d", added, len(self._lines))
        return added

    def render(self) -> list[tuple[int, str]]:
        """Return 1-based (index, text) pairs. Raises EmptyDocument if empty."""
        if not self._lines:
            raise EmptyDocument()
        return list(enumerate(self._lines, start=1))

    def save_to(self, path: Path | str) -> SaveResult:
        """Write the document to path, adding the default extension if needed."""
        if not self._lines:
            raise EmptyDocument("No content to save.")

        target = resolve_save_path(path, self.default_extension)
        try:
            write_lines(target, self._lines, self.encoding, self.encoding_errors)
        except OSError as e:
            logger.warning("Could not write %s: %s", target, e)
            raise DocumentIOError(str(target), e.strerror or str(e)) from e
        except UnicodeEncodeError as e:
            logger.warning("Could not encode %s: %s", target, e)
            raise DocumentIOError(str(target), str(e)) from e

        logger.info("Saved %d line(s) to %s", len(self._lines), target)
        return SaveResult(lines=len(self._lines), path=target)

    def load_from(self, path: Path | str) -> int:
        """Replace the document with the contents of path. Returns lines loaded.

        The document is only replaced once the whole file has been read.
        """
        source = Path(path)
        try:
            loaded = read_lines(source, self.encoding, self.encoding_errors)
        except OSError as e:
            logger.warning("Could not read %s: %s", source, e)
            raise DocumentIOError(str(source), e.strerror or str(e)) from e
        except UnicodeDecodeError as e:
            logger.warning("Could not decode %s: %s", source, e)
            raise DocumentIOError(str(source), str(e)) from e

        self._lines = loaded
        logger.info("Loaded %d line(s) from %s", len(loaded), source)
        return len(loaded)

    def clear(self) -> int:
        """Remove every line. Returns count removed."""
        if not self._lines:
            raise AlreadyEmpty()
        removed = len(self._lines)
        self._lines = []
        logger.info("Cleared %d line(s)", removed)
        return removed
