"""
Theme system for terminal styling.
"""

from .codes import RESET, STYLE_CODES, is_style_code, resolve
from .engine import (
    BUILTIN_THEMES,
    CATEGORIES,
    ByName,
    Inline,
    StyleSpec,
    Theme,
    ThemeError,
    ThemeRef,
    ThemeRegistry,
    registry,
)

__all__ = [
    "RESET",
    "STYLE_CODES",
    "is_style_code",
    "resolve",
    "BUILTIN_THEMES",
    "CATEGORIES",
    "ByName",
    "Inline",
    "StyleSpec",
    "Theme",
    "ThemeError",
    "ThemeRef",
    "ThemeRegistry",
    "registry",
]
