"""Document session and line storage."""

from lineedit.document.errors import (
    AlreadyEmpty,
    DocumentIOError,
    EditorError,
    EmptyDocument,
    InvalidChoice,
)
from lineedit.document.session import DocumentSession, SaveResult

__all__ = [
    "AlreadyEmpty",
    "DocumentIOError",
    "DocumentSession",
    "EditorError",
    "EmptyDocument",
    "InvalidChoice",
    "SaveResult",
]
