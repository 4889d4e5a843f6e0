"""Settings management for nginx-editor.

Preferences (editor theme and colour mode) live in a YAML file.
"""

import logging
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

import yaml

from nginx_editor.errors import SettingsError
from nginx_editor.model.theme import DEFAULT_THEME, ColorMode, theme_ids

logger = logging.getLogger(__name__)


@dataclass
class EditorSettings:
    """User preferences for highlighted output."""

    theme: str = DEFAULT_THEME.id
    mode: str = ColorMode.DARK.value

    @property
    def color_mode(self) -> ColorMode:
        return ColorMode(self.mode)


class SettingsManager:
    """Loads and saves editor settings stored in YAML format."""

    FILENAME = "settings.yaml"

    def __init__(self, config_dir: Path | None = None) -> None:
        if config_dir is None:
            # Check for environment variable override
            env_config = os.getenv("NGINX_EDITOR_CONFIG")
            if env_config:
                config_dir = Path(env_config).expanduser().resolve()
            else:
                # Default to ~/.nginx-editor
                config_dir = Path.home() / ".nginx-editor"

        self.config_dir = config_dir
        self.settings_file = config_dir / self.FILENAME

    def _load_raw(self) -> dict[str, Any]:
        """Load the raw mapping from the YAML file."""
        if not self.settings_file.exists():
            return {}

        try:
            with open(self.settings_file, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Ignoring unreadable settings file %s: %s", self.settings_file, e)
            return {}

        if not isinstance(data, dict):
            logger.warning("Ignoring malformed settings file %s", self.settings_file)
            return {}
        return data

    def load(self) -> EditorSettings:
        """Return the stored settings, with defaults for missing or bad values."""
        data = self._load_raw()
        settings = EditorSettings()

        theme = data.get("theme")
        if theme in theme_ids():
            settings.theme = theme
        elif theme is not None:
            logger.warning("Unknown theme %r in settings, using %s", theme, settings.theme)

        mode = data.get("mode")
        if mode in {m.value for m in ColorMode}:
            settings.mode = mode
        elif mode is not None:
            logger.warning("Unknown colour mode %r in settings, using %s", mode, settings.mode)

        return settings

    def save(self, settings: EditorSettings) -> None:
        """Write settings to the YAML file."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        with open(self.settings_file, "w", encoding="utf-8") as f:
            yaml.safe_dump(asdict(settings), f)
        logger.debug("Saved settings to %s", self.settings_file)

    def set_theme(self, theme_id: str) -> EditorSettings:
        """Persist a new default theme."""
        if theme_id not in theme_ids():
            raise SettingsError(f"Unknown theme '{theme_id}'. Choose from: {', '.join(theme_ids())}")
        settings = self.load()
        settings.theme = theme_id
        self.save(settings)
        return settings

    def set_mode(self, mode: str) -> EditorSettings:
        """Persist a new default colour mode."""
        try:
            ColorMode(mode)
        except ValueError:
            raise SettingsError(f"Unknown colour mode '{mode}'. Choose 'dark' or 'light'") from None
        settings = self.load()
        settings.mode = mode
        self.save(settings)
        return settings
