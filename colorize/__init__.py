"""
colorize - Theme-based ANSI styling for terminal output.

- Style table: fixed style code -> escape sequence mapping
- Theme registry: built-in and custom themes per message category
- Colorizer: formatting, semantic logging and table display
"""

__version__ = "0.1.0"

from .formatter import Colorizer, colorizer
from .table import render_table
from .theme.codes import RESET, STYLE_CODES
from .theme.engine import (
    ByName,
    Inline,
    StyleSpec,
    Theme,
    ThemeError,
    ThemeRegistry,
    registry,
)

__all__ = [
    # Formatting
    "Colorizer",
    "colorizer",
    "render_table",
    # Style table
    "RESET",
    "STYLE_CODES",
    # Themes
    "ByName",
    "Inline",
    "StyleSpec",
    "Theme",
    "ThemeError",
    "ThemeRegistry",
    "registry",
]
