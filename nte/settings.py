"""User settings for the editor.

Settings live in a JSON file in the OS-appropriate user config directory.
The file is optional; a missing file, unreadable file or invalid value
falls back to the defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import EditorConstants

logger = logging.getLogger(__name__)

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class EditorSettings:
    tab_width: int = EditorConstants.DEFAULT_TAB_WIDTH
    log_file: Optional[str] = None
    log_level: str = EditorConstants.DEFAULT_LOG_LEVEL


class SettingsStore:
    """Loads editor settings from ``settings.json``."""

    def __init__(self, config_dir: Optional[Path] = None):
        self._config_dir = config_dir or Path(
            platformdirs.user_config_dir(EditorConstants.SETTINGS_APP_NAME))
        self._settings_file = self._config_dir / EditorConstants.SETTINGS_FILENAME

    @property
    def settings_file(self) -> Path:
        return self._settings_file

    def _load_raw(self) -> Dict[str, Any]:
        """Read the settings file.

        Returns:
            The decoded JSON object, or an empty dict when the file is
            missing or unusable.
        """
        if not self._settings_file.exists():
            return {}

        try:
            with open(self._settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load settings from {self._settings_file}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning("Settings file has invalid format (not a dict), ignoring")
            return {}
        return data

    def load(self) -> EditorSettings:
        """Load settings, keeping the default for every invalid value."""
        settings = EditorSettings()
        for key, value in self._load_raw().items():
            if not hasattr(settings, key):
                logger.warning(f"Unknown setting {key!r}, ignoring")
                continue
            if not self.validate_setting(key, value):
                logger.warning(f"Invalid value for {key}: {value!r}, using default")
                continue
            if key == 'log_level':
                value = value.upper()
            setattr(settings, key, value)
        return settings

    def validate_setting(self, key: str, value: Any) -> bool:
        """Validate a setting value.

        Args:
            key: Setting key name.
            value: Setting value to validate.

        Returns:
            True if setting is valid, False otherwise.
        """
        if key == 'tab_width':
            # bool is an int subclass; reject it explicitly
            if not isinstance(value, int) or isinstance(value, bool):
                return False
            return EditorConstants.MIN_TAB_WIDTH <= value <= EditorConstants.MAX_TAB_WIDTH

        if key == 'log_file':
            return value is None or (isinstance(value, str) and bool(value))

        if key == 'log_level':
            return isinstance(value, str) and value.upper() in LOG_LEVELS

        return False


def load_settings(config_dir: Optional[Path] = None) -> EditorSettings:
    """Load settings from the default (or given) config directory."""
    return SettingsStore(config_dir).load()
