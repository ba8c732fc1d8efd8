"""Diagnostic logging for lineedit.

The editor screen goes to stdout through click; log records go to stderr so
they never interleave with prompts. Session operations log saves, loads and
clears at INFO, appends at DEBUG, and failed file access at WARNING, all
under the ``lineedit`` logger.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any

TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """Render each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[0]:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def setup_logging(level: str = "WARNING", json_output: bool = False) -> None:
    """Route ``lineedit`` records to stderr.

    Replaces any handler from an earlier call, so the CLI can reconfigure
    once the config file has been read. An unknown level name falls back to
    WARNING, which keeps the interactive screen free of routine records.
    """
    package_logger = logging.getLogger("lineedit")
    package_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    package_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    if json_output:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    package_logger.addHandler(handler)
