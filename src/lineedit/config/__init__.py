"""Configuration system for lineedit."""

from lineedit.config.loader import load_config
from lineedit.config.schema import LineEditConfig

__all__ = ["load_config", "LineEditConfig"]
