"""Shared test fixtures."""

import logging
from pathlib import Path

import pytest

from lineedit.document.session import DocumentSession


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    """Create a minimal valid config YAML file."""
    config = tmp_path / "lineedit.yaml"
    config.write_text(
        """\
editor:
  default_extension: ".md"
  number_width: 3
logging:
  level: "debug"
"""
    )
    return config


@pytest.fixture
def empty_config_yaml(tmp_path: Path) -> Path:
    """Create an empty config YAML file."""
    config = tmp_path / "lineedit.yaml"
    config.write_text("{}\n")
    return config


@pytest.fixture
def session() -> DocumentSession:
    return DocumentSession()


@pytest.fixture
def sample_doc(tmp_path: Path) -> Path:
    """A two-line document on disk, no trailing newline."""
    path = tmp_path / "sample.txt"
    path.write_bytes(b"Hello\nWorld")
    return path


@pytest.fixture(autouse=True)
def reset_lineedit_logger():
    """Drop handlers installed by setup_logging between tests."""
    yield
    logging.getLogger("lineedit").handlers.clear()
