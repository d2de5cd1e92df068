"""
Theme system.
"""

from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Optional, Union
import logging
import yaml
from colorize.resources import resources

logger = logging.getLogger(__name__)

CATEGORIES = ("success", "error", "warning", "info", "debug", "prompt")

# Accepted spellings per StyleSpec field when reading mappings
_FIELD_ALIASES = {
    "color": ("color",),
    "background_color": ("background_color", "backgroundColor", "bgColor"),
    "emphasis": ("emphasis", "style"),
}


class ThemeError(ValueError):
    """Raised when a theme definition has the wrong shape."""


@dataclass(frozen=True)
class StyleSpec:
    """Foreground, background and emphasis codes for one category."""
    color: Optional[str] = None
    background_color: Optional[str] = None
    emphasis: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping) -> StyleSpec:
        """Build from a mapping, accepting camelCase and legacy key names."""
        if not isinstance(data, Mapping):
            raise ThemeError(f"style must be a mapping, got {type(data).__name__}")

        values = {}
        for attr, keys in _FIELD_ALIASES.items():
            value = None
            for key in keys:
                if data.get(key) is not None:
                    value = data[key]
                    break
            if value is not None and not isinstance(value, str):
                raise ThemeError(f"{attr} must be a string, got {type(value).__name__}")
            values[attr] = value
        return cls(**values)

    def to_dict(self) -> dict:
        return {
            "color": self.color,
            "background_color": self.background_color,
            "emphasis": self.emphasis,
        }


@dataclass
class Theme:
    """Style for each semantic message category."""
    name: str
    success: StyleSpec
    error: StyleSpec
    warning: StyleSpec
    info: StyleSpec
    debug: StyleSpec
    prompt: StyleSpec

    def spec(self, category: str) -> StyleSpec:
        """StyleSpec for a category name."""
        if category not in CATEGORIES:
            raise KeyError(category)
        return getattr(self, category)

    def validate(self) -> Theme:
        """Check every category holds a StyleSpec. Returns self."""
        for category in CATEGORIES:
            if not isinstance(getattr(self, category, None), StyleSpec):
                raise ThemeError(f"theme '{self.name}' has no valid '{category}' style")
        return self

    @classmethod
    def from_dict(cls, data: Any, name: Optional[str] = None) -> Theme:
        """
        Build a theme from a mapping of category -> style mapping.

        Args:
            data: Mapping with all six categories (and optionally "name")
            name: Theme name, overrides data["name"]

        Raises:
            ThemeError: data is not a mapping or a category is missing/malformed
        """
        if not isinstance(data, Mapping):
            raise ThemeError(f"theme must be a mapping, got {type(data).__name__}")

        specs = {}
        for category in CATEGORIES:
            if category not in data:
                raise ThemeError(f"theme is missing the '{category}' category")
            value = data[category]
            try:
                specs[category] = value if isinstance(value, StyleSpec) else StyleSpec.from_dict(value)
            except ThemeError as e:
                raise ThemeError(f"{category}: {e}") from e

        theme_name = name or data.get("name") or "custom"
        return cls(name=str(theme_name), **specs)

    def to_dict(self) -> dict:
        data = {"name": self.name}
        for category in CATEGORIES:
            data[category] = self.spec(category).to_dict()
        return data

    @classmethod
    def load(cls, path: Path) -> Theme:
        """Load theme from YAML file."""
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        name = data.get("name") if isinstance(data, Mapping) else None
        return cls.from_dict(data, name=name or Path(path).stem)

    def save(self, path: Path) -> None:
        """Save theme to YAML file."""
        with open(path, 'w', encoding="utf-8") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    @classmethod
    def default(cls) -> Theme:
        """Plain foreground colors, bright prompt."""
        return cls(
            name="default",
            success=StyleSpec("green"),
            error=StyleSpec("red"),
            warning=StyleSpec("yellow"),
            info=StyleSpec("cyan"),
            debug=StyleSpec("magenta"),
            prompt=StyleSpec("white", emphasis="bright"),
        )

    @classmethod
    def dark(cls) -> Theme:
        """Bright colors for dark backgrounds."""
        return cls(
            name="dark",
            success=StyleSpec("green", emphasis="bright"),
            error=StyleSpec("red", emphasis="bright"),
            warning=StyleSpec("yellow", emphasis="bright"),
            info=StyleSpec("blue", emphasis="bright"),
            debug=StyleSpec("magenta", emphasis="dim"),
            prompt=StyleSpec("white", emphasis="underscore"),
        )

    @classmethod
    def light(cls) -> Theme:
        """Dimmed colors for light backgrounds."""
        return cls(
            name="light",
            success=StyleSpec("green", emphasis="dim"),
            error=StyleSpec("red", emphasis="dim"),
            warning=StyleSpec("yellow", emphasis="dim"),
            info=StyleSpec("blue", emphasis="dim"),
            debug=StyleSpec("magenta", emphasis="dim"),
            prompt=StyleSpec("black", emphasis="bright"),
        )

    @classmethod
    def minimal(cls) -> Theme:
        return cls(
            name="minimal",
            success=StyleSpec("green"),
            error=StyleSpec("red"),
            warning=StyleSpec("yellow"),
            info=StyleSpec("white"),
            debug=StyleSpec("white", emphasis="dim"),
            prompt=StyleSpec("white"),
        )

    @classmethod
    def vibrant(cls) -> Theme:
        """Solid background blocks per category."""
        return cls(
            name="vibrant",
            success=StyleSpec("green", "bgBlack", "bright"),
            error=StyleSpec("white", "bgRed", "bright"),
            warning=StyleSpec("black", "bgYellow"),
            info=StyleSpec("white", "bgBlue", "bright"),
            debug=StyleSpec("white", "bgMagenta"),
            prompt=StyleSpec("black", "bgCyan", "bright"),
        )


BUILTIN_THEMES = ("default", "dark", "light", "minimal", "vibrant")


@dataclass(frozen=True)
class ByName:
    """Select a theme by its registry name."""
    name: str


@dataclass(frozen=True)
class Inline:
    """Select a theme object directly, bypassing the registry."""
    theme: Theme


ThemeRef = Union[ByName, Inline]


def coerce_theme(value: Any, name: Optional[str] = None) -> Theme:
    """
    Turn a Theme or theme mapping into a validated Theme.

    Raises:
        ThemeError: value has the wrong shape
    """
    if isinstance(value, Theme):
        theme = value.validate()
        if name and theme.name != name:
            theme = replace(theme, name=name)
        return theme
    return Theme.from_dict(value, name=name)


class ThemeRegistry:
    """Named themes, seeded with the built-ins."""

    def __init__(self, theme_dir: Path = None):
        """
        Initialize theme registry.

        Args:
            theme_dir: Directory to load YAML themes from
        """
        self.theme_dir = theme_dir or resources.themes_dir

        self._themes: dict[str, Theme] = {}

        # Register built-in themes
        for name in BUILTIN_THEMES:
            self._themes[name] = getattr(Theme, name)()

    def load_themes(self, theme_dir: Path = None) -> int:
        """
        Load all themes from a theme directory.

        Returns:
            Number of themes loaded
        """
        theme_dir = Path(theme_dir or self.theme_dir)
        if not theme_dir.exists():
            logger.debug(f"Theme directory not found: {theme_dir}")
            return 0

        loaded = 0
        for path in sorted(theme_dir.glob("*.yaml")):
            try:
                theme = Theme.load(path)
            except Exception as e:
                logger.warning(f"Failed to load theme {path}: {e}")
                continue
            self._themes[theme.name] = theme
            loaded += 1
            logger.debug(f"Loaded theme: {theme.name}")
        return loaded

    def get(self, name: str) -> Theme:
        """
        Get theme by name.

        Args:
            name: Theme name

        Returns:
            The registered theme, or the "default" theme if name is unknown
        """
        theme = self._themes.get(name) if isinstance(name, str) else None
        if theme is None:
            logger.debug(f"Unknown theme {name!r}, using default")
            return self._themes.get("default") or Theme.default()
        return theme

    def register(self, name: str, theme: Union[Theme, Mapping]) -> bool:
        """
        Register a theme under a name, replacing any existing entry.

        Malformed themes are ignored and leave the registry unchanged.

        Returns:
            True if the theme was stored
        """
        if not isinstance(name, str) or not name:
            logger.debug(f"Rejected theme with invalid name {name!r}")
            return False
        try:
            entry = coerce_theme(theme, name=name)
        except ThemeError as e:
            logger.debug(f"Rejected theme '{name}': {e}")
            return False

        self._themes[name] = entry
        return True

    def resolve(self, ref: ThemeRef) -> Theme:
        """Resolve a ThemeRef to a theme, falling back to default."""
        if isinstance(ref, ByName):
            return self.get(ref.name)
        if isinstance(ref, Inline):
            try:
                return coerce_theme(ref.theme)
            except ThemeError as e:
                logger.debug(f"Inline theme rejected: {e}")
        return self.get("default")

    def names(self) -> list[str]:
        """
        List available theme names.

        Returns:
            Sorted list of theme names
        """
        return sorted(self._themes.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._themes


# Process-wide registry
registry = ThemeRegistry()
