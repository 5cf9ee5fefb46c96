# src/htmlwalker/utils/path_utils.py
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class PathUtils:
    """
    A central utility for reliably retrieving important package and user paths.
    """

    # --- Package specific paths

    @staticmethod
    def get_package_root() -> Path:
        """Returns the directory of the installed 'htmlwalker' package."""
        return Path(__file__).resolve().parent.parent

    @staticmethod
    def get_settings_file() -> Path:
        return PathUtils.get_package_root() / "settings.json"

    # --- User specific paths ---

    @staticmethod
    def get_user_config_dir() -> Path:
        """
        Returns the path to the user's .htmlwalker directory.
        (e.g., ~/.htmlwalker/)
        """
        return Path.home() / ".htmlwalker"

    @staticmethod
    def get_user_settings_file() -> Path:
        """
        Returns the path to the optional per-user settings overrides.
        (e.g., ~/.htmlwalker/settings.json)
        """
        return PathUtils.get_user_config_dir() / "settings.json"

    @staticmethod
    def get_cache_root() -> Path:
        """
        Returns the default root directory for local response caches.
        (e.g., ~/.htmlwalker/cache)
        """
        return PathUtils.get_user_config_dir() / "cache"

    # --- Helper methods ---

    @staticmethod
    def get_cache_db_path(cache_name: str, base_dir: Path = None) -> Path:
        """
        Returns the path to the SQLite file backing a named cache.
        Creates the parent directory if it doesn't exist.
        """
        root = Path(base_dir) if base_dir else PathUtils.get_cache_root()
        root.mkdir(parents=True, exist_ok=True)
        return root / f"{cache_name}.db"
