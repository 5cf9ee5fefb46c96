# src/htmlwalker/managers/config_manager.py
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from htmlwalker.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)


def _merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively overlays `overrides` onto `base` (in place) and returns `base`."""
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


class ConfigManager:
    """
    Singleton holding the library defaults: HTTP client, response cache and logging.

    The settings.json bundled with the package provides every key; a user file at
    ~/.htmlwalker/settings.json, when present, overrides individual keys.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._config = {}
            cls._instance.reset()
        return cls._instance

    def get_nested(self, key_path: str, default: Optional[Any] = None) -> Any:
        """
        Safely retrieves a nested value, e.g. 'cache.name'.
        Returns `default` when any part of the path is missing or null.
        """
        value = self._config
        for key in key_path.split('.'):
            if not isinstance(value, dict):
                return default
            value = value.get(key)
        return value if value is not None else default

    def get_section(self, name: str) -> Dict[str, Any]:
        """Returns a copy of a top-level section ('http', 'cache', 'debug'), or {}."""
        section = self._config.get(name)
        return dict(section) if isinstance(section, dict) else {}

    def reset(self) -> None:
        """Reloads the bundled settings and applies the user overrides on top."""
        bundled_path = PathUtils.get_settings_file()
        if not bundled_path.exists():
            logger.warning("Bundled settings.json not found at %s. Using model defaults.", bundled_path)
            config: Dict[str, Any] = {}
        else:
            config = self._read(bundled_path)

        user_path = PathUtils.get_user_settings_file()
        if user_path.exists():
            _merge(config, self._read(user_path))
            logger.debug("Applied user settings from %s.", user_path)

        self._config = config

    @staticmethod
    def _read(path: Path) -> Dict[str, Any]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error("Failed to load settings from %s: %s", path, e)
            return {}
        if not isinstance(data, dict):
            logger.error("Ignoring settings in %s: expected a JSON object.", path)
            return {}
        return data


# The global singleton instance shared by the library.
config_manager = ConfigManager()
