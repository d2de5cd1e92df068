"""
Themed ANSI formatting and semantic console logging.
"""

from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Optional, TextIO, Union
import logging
import sys

from colorize.table import is_tabular, render_table
from colorize.theme.codes import RESET, resolve
from colorize.theme.engine import (
    ByName,
    Inline,
    Theme,
    ThemeError,
    ThemeRef,
    ThemeRegistry,
    registry as default_registry,
)

logger = logging.getLogger(__name__)

CUSTOM_THEME = "custom"
TABLE_ERROR = "Invalid data for table display"


class Colorizer:
    """
    Applies the active theme to text written to a line-oriented stream.

    Usage:
        out = Colorizer(theme="dark")
        out.info("Starting").success("Done")
        question = out.format_prompt("Name? ")

    Every setter and message method returns the instance for chaining.
    """

    def __init__(
        self,
        theme: Union[str, Theme, Mapping, ThemeRef] = "default",
        enabled: bool = True,
        custom_theme: Optional[Union[Theme, Mapping]] = None,
        registry: ThemeRegistry = None,
        stream: Optional[TextIO] = None,
    ):
        """
        Args:
            theme: Theme name, theme object/mapping or ThemeRef
            enabled: Whether escape sequences are emitted
            custom_theme: Theme activated when theme == "custom"
            registry: Registry for name lookups (process-wide one by default)
            stream: Output sink, sys.stdout at write time if None
        """
        self.registry = registry if registry is not None else default_registry
        self.enabled = bool(enabled)
        self.stream = stream
        self.theme: Theme = self.registry.get("default")
        self.set_theme(theme or "default", custom_theme)

    # --- configuration -----------------------------------------------------

    def use(self, ref: ThemeRef) -> Colorizer:
        """Activate the theme a ThemeRef points at."""
        self.theme = self.registry.resolve(ref)
        return self

    def set_theme(
        self,
        theme: Union[str, Theme, Mapping, ThemeRef],
        custom_theme: Optional[Union[Theme, Mapping]] = None,
    ) -> Colorizer:
        """
        Set the active theme.

        "custom" together with custom_theme activates that object without
        registering it. Other names go through the registry and unknown names
        fall back to "default". Theme objects and mappings are used as-is once
        their shape checks out, otherwise "default" is used.
        """
        if isinstance(theme, (ByName, Inline)):
            return self.use(theme)
        if isinstance(theme, str):
            if theme == CUSTOM_THEME and custom_theme is not None:
                return self.use(Inline(self._inline(custom_theme)))
            return self.use(ByName(theme))
        if isinstance(theme, (Theme, Mapping)):
            return self.use(Inline(self._inline(theme)))

        logger.debug(f"Unsupported theme reference {theme!r}, using default")
        return self.use(ByName("default"))

    def _inline(self, theme: Union[Theme, Mapping]) -> Theme:
        # Mappings are parsed here so ThemeRegistry.resolve only sees Theme objects
        if isinstance(theme, Mapping):
            try:
                return Theme.from_dict(theme, name=CUSTOM_THEME)
            except ThemeError as e:
                logger.debug(f"Custom theme rejected: {e}")
                return self.registry.get("default")
        return theme

    def create_theme(self, name: str, theme: Union[Theme, Mapping]) -> Colorizer:
        """Register a theme by name in the shared registry."""
        self.registry.register(name, theme)
        return self

    def set_enabled(self, enabled: bool) -> Colorizer:
        """Enable or disable escape sequences."""
        self.enabled = bool(enabled)
        return self

    # --- formatting --------------------------------------------------------

    def format(
        self,
        text: str,
        color: Optional[str] = None,
        background_color: Optional[str] = None,
        emphasis: Optional[str] = None,
    ) -> str:
        """
        Wrap text in escape sequences without writing it.

        Sequences are applied emphasis first, then background, then color,
        and the result always ends with RESET. Returns text unchanged when
        styling is disabled.
        """
        if not self.enabled:
            return text
        prefix = resolve(emphasis) + resolve(background_color) + resolve(color)
        return f"{prefix}{text}{RESET}"

    def format_prompt(self, text: str) -> str:
        """Format text with the theme's prompt style."""
        spec = self.theme.prompt
        return self.format(text, spec.color, spec.background_color, spec.emphasis)

    # --- output ------------------------------------------------------------

    def _write(self, line: str) -> None:
        print(line, file=sys.stdout if self.stream is None else self.stream)

    def log(
        self,
        text: str,
        color: Optional[str] = None,
        background_color: Optional[str] = None,
        emphasis: Optional[str] = None,
    ) -> Colorizer:
        """Format text and write it as one line."""
        self._write(self.format(text, color, background_color, emphasis))
        return self

    def _emit(self, category: str, text: str, emphasis: Optional[str]) -> Colorizer:
        spec = self.theme.spec(category)
        return self.log(text, spec.color, spec.background_color, emphasis or spec.emphasis)

    def success(self, text: str, emphasis: Optional[str] = None) -> Colorizer:
        return self._emit("success", text, emphasis)

    def error(self, text: str, emphasis: Optional[str] = None) -> Colorizer:
        return self._emit("error", text, emphasis)

    def warning(self, text: str, emphasis: Optional[str] = None) -> Colorizer:
        return self._emit("warning", text, emphasis)

    def info(self, text: str, emphasis: Optional[str] = None) -> Colorizer:
        return self._emit("info", text, emphasis)

    def debug(self, text: str, emphasis: Optional[str] = None) -> Colorizer:
        return self._emit("debug", text, emphasis)

    def table(self, data: Any, title: Optional[str] = None) -> Colorizer:
        """
        Write data as a table, with an optional info-styled title.

        Non-structured data (None, strings, numbers) produces a single error
        line instead.
        """
        if not is_tabular(data):
            return self.error(TABLE_ERROR)

        if title:
            self.info(title)

        lines = render_table(data)
        self._write(self.format(lines[0], emphasis="bright"))
        for line in lines[1:]:
            self._write(line)
        return self


# Process-wide instance
colorizer = Colorizer()
