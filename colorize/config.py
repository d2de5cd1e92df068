"""
Persistent settings for colorize.
Stored in ~/.colorize/config.json, environment variables take precedence.
"""

from __future__ import annotations
import json
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, asdict, replace
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

# Default config location
DEFAULT_CONFIG_DIR = Path.home() / ".colorize"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.json"

# Environment overrides
ENV_THEME = "COLORIZE_THEME"
ENV_DEBUG = "COLORIZE_DEBUG"
ENV_NO_COLOR = "NO_COLOR"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class AppSettings:
    """
    Settings that persist across runs.
    """
    theme_name: str = "default"
    enabled: bool = True
    debug: bool = False

    # Extra YAML themes, loaded after the bundled ones
    theme_dir: Optional[str] = None

    def to_dict(self) -> dict:
        """Serialize to dict."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> AppSettings:
        """Deserialize from dict, ignoring unknown keys."""
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_fields}
        return cls(**filtered)


def apply_env(settings: AppSettings, environ: Mapping = None) -> AppSettings:
    """
    Return a copy of settings with environment overrides applied.

    COLORIZE_THEME selects the theme, COLORIZE_DEBUG turns on debug output
    and any non-empty NO_COLOR disables styling.
    """
    environ = os.environ if environ is None else environ
    overrides = {}

    theme = (environ.get(ENV_THEME) or "").strip()
    if theme:
        overrides["theme_name"] = theme

    debug = (environ.get(ENV_DEBUG) or "").strip().lower()
    if debug:
        overrides["debug"] = debug in _TRUTHY

    if environ.get(ENV_NO_COLOR):
        overrides["enabled"] = False

    return replace(settings, **overrides)


class SettingsManager:
    """
    Manages loading and saving settings.

    Usage:
        manager = SettingsManager()
        manager.settings.theme_name = "dark"
        manager.save()
    """

    def __init__(self, config_path: Path = None):
        self._config_path = config_path or DEFAULT_CONFIG_FILE
        self._settings: Optional[AppSettings] = None

    @property
    def settings(self) -> AppSettings:
        """Get current settings, loading from disk if needed."""
        if self._settings is None:
            self._settings = self.load()
        return self._settings

    @property
    def config_path(self) -> Path:
        return self._config_path

    def load(self) -> AppSettings:
        """Load settings from disk, or return defaults."""
        if self._config_path.exists():
            try:
                data = json.loads(self._config_path.read_text())
                logger.debug(f"Loaded settings from {self._config_path}")
                return AppSettings.from_dict(data)
            except (json.JSONDecodeError, TypeError, AttributeError) as e:
                logger.warning(f"Failed to load settings: {e}, using defaults")
                return AppSettings()
        else:
            logger.debug("No settings file found, using defaults")
            return AppSettings()

    def save(self) -> None:
        """Save current settings to disk."""
        if self._settings is None:
            return

        # Ensure directory exists
        self._config_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            self._config_path.write_text(
                json.dumps(self._settings.to_dict(), indent=2)
            )
            logger.debug(f"Saved settings to {self._config_path}")
        except OSError as e:
            logger.error(f"Failed to save settings: {e}")

    def reset(self) -> AppSettings:
        """Reset to default settings (does not save automatically)."""
        self._settings = AppSettings()
        return self._settings
