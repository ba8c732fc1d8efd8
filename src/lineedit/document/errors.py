"""Errors raised by document session operations."""

from __future__ import annotations


class EditorError(Exception):
    """Base class for recoverable editor errors."""


class EmptyDocument(EditorError):
    """The document has no lines to act on."""

    def __init__(self, message: str = "Document is empty.") -> None:
        super().__init__(message)


class AlreadyEmpty(EditorError):
    """Clear was requested on a document with no lines."""

    def __init__(self, message: str = "Document is already empty.") -> None:
        super().__init__(message)


class DocumentIOError(EditorError):
    """A file could not be opened, read or written."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class InvalidChoice(EditorError):
    """Menu input was non-numeric or out of range."""

    def __init__(self, text: str, low: int, high: int) -> None:
        self.text = text
        super().__init__(f"Invalid choice {text!r}. Please enter a number between {low}-{high}.")
