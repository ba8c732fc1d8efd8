"""lineedit - a menu-driven line-oriented text editor."""

__version__ = "0.1.0"
