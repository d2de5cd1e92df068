"""
ANSI escape sequences keyed by style code.
"""

from __future__ import annotations
from types import MappingProxyType
from typing import Optional


def _sgr(n: int) -> str:
    return f"\x1b[{n}m"


STYLE_CODES = MappingProxyType({
    # Styles
    "reset": _sgr(0),
    "bright": _sgr(1),
    "dim": _sgr(2),
    "underscore": _sgr(4),
    "underline": _sgr(4),
    "blink": _sgr(5),
    "reverse": _sgr(7),
    "hidden": _sgr(8),

    # Text colors
    "black": _sgr(30),
    "red": _sgr(31),
    "green": _sgr(32),
    "yellow": _sgr(33),
    "blue": _sgr(34),
    "magenta": _sgr(35),
    "cyan": _sgr(36),
    "white": _sgr(37),

    # Background colors
    "bgBlack": _sgr(40),
    "bgRed": _sgr(41),
    "bgGreen": _sgr(42),
    "bgYellow": _sgr(43),
    "bgBlue": _sgr(44),
    "bgMagenta": _sgr(45),
    "bgCyan": _sgr(46),
    "bgWhite": _sgr(47),
})

RESET = STYLE_CODES["reset"]


def is_style_code(code: Optional[str]) -> bool:
    """True if code names an entry of the style table."""
    return isinstance(code, str) and code in STYLE_CODES


def resolve(code: Optional[str]) -> str:
    """
    Get the escape sequence for a style code.

    Args:
        code: Style code such as "bright", "red" or "bgBlue"

    Returns:
        Escape sequence, or "" for None and unknown codes
    """
    if not is_style_code(code):
        return ""
    return STYLE_CODES[code]
