"""Read lineedit settings from a YAML file."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from lineedit.config.schema import LineEditConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("~/.config/lineedit/config.yaml")


def load_config(path: Path | str | None = None) -> LineEditConfig:
    """Build the editor configuration from ``path``.

    Anything that is not a regular file (None, missing, a directory) gives
    the built-in defaults, as does a file whose top level is not a mapping.
    Unparseable YAML and values of the wrong type raise ValueError naming
    the file.
    """
    if path is None:
        return LineEditConfig()

    config_file = Path(path).expanduser()
    if not config_file.is_file():
        logger.debug("No config at %s, using defaults", config_file)
        return LineEditConfig()

    try:
        data = yaml.safe_load(config_file.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Malformed YAML in {config_file}: {e}") from e

    if not isinstance(data, dict):
        if data is not None:
            logger.warning("Ignoring %s: top level is %s, not a mapping", config_file, type(data).__name__)
        return LineEditConfig()

    try:
        return LineEditConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid settings in {config_file}: {e}") from e
