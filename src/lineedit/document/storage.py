"""Flat-file line storage: one document line per physical line."""

from __future__ import annotations

from pathlib import Path

DEFAULT_EXTENSION = ".txt"


def resolve_save_path(path: Path | str, default_extension: str = DEFAULT_EXTENSION) -> Path:
    """Append the default extension when the path has no '.' anywhere.

    The check covers the whole path, so "./notes" or "dir.d/notes" are
    used as given.
    """
    name = str(path)
    if "." not in name:
        name += default_extension
    return Path(name)


def write_lines(
    path: Path,
    lines: list[str],
    encoding: str = "utf-8",
    errors: str = "surrogateescape",
) -> None:
    """Write lines separated by a single newline, with no trailing newline.

    The text is encoded before the file is opened, so an encoding failure
    leaves an existing target untouched.
    """
    data = "\n".join(lines).encode(encoding, errors)
    with open(path, "wb") as f:
        f.write(data)


def read_lines(
    path: Path,
    encoding: str = "utf-8",
    errors: str = "surrogateescape",
) -> list[str]:
    """Read all lines, splitting on '\\n' only.

    A final newline does not produce a trailing empty line and an empty
    file yields no lines. Carriage returns are kept as part of the line.
    """
    with open(path, encoding=encoding, errors=errors, newline="") as f:
        text = f.read()
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines
