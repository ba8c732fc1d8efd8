"""Pydantic v2 models for lineedit configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field


class EditorConfig(BaseModel):
    default_extension: str = ".txt"
    encoding: str = "utf-8"
    encoding_errors: str = "surrogateescape"
    number_width: int = 4
    clear_screen: bool = True
    pause_after_action: bool = True
    show_banner: bool = True


class LoggingConfig(BaseModel):
    level: str = "WARNING"
    json_output: bool = False


class LineEditConfig(BaseModel):
    """Root configuration model for lineedit."""

    editor: EditorConfig = Field(default_factory=EditorConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
