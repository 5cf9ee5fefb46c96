# src/htmlwalker/services/response_cache_service.py
import hashlib
import logging
import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Optional

from htmlwalker.managers.config_manager import config_manager
from htmlwalker.model import CachedResponse, DEFAULT_ACCEPT, DEFAULT_CACHE_NAME
from htmlwalker.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)

CACHE_SCHEMA_SCRIPT = """
CREATE TABLE IF NOT EXISTS responses (
    key TEXT PRIMARY KEY,
    url TEXT NOT NULL,
    accept TEXT NOT NULL,
    status_code INTEGER NOT NULL,
    body TEXT NOT NULL,
    fetched_at TEXT NOT NULL
);
"""


class ResponseCacheService:
    """
    A named, persistent store of HTTP response bodies.

    Responsibility:
        - Maps a request (method, accept type, url) to the body it returned.
        - Keeps one SQLite file per cache name below the cache root.

    Constraints:
        - No expiry: an entry lives until clear() is called.
    """

    def __init__(self, cache_name: Optional[str] = None, base_dir: Optional[Path] = None):
        self.cache_name = cache_name or config_manager.get_nested("cache.name", DEFAULT_CACHE_NAME)
        configured_dir = config_manager.get_nested("cache.dir")
        self.base_dir = Path(base_dir) if base_dir else (Path(configured_dir).expanduser() if configured_dir else None)
        self.db_path = PathUtils.get_cache_db_path(self.cache_name, self.base_dir)
        self._conn: Optional[sqlite3.Connection] = None
        logger.debug("ResponseCacheService '%s' at: %s", self.cache_name, self.db_path)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    # --- CONNECTION METHODS ---

    def _get_connection(self) -> sqlite3.Connection:
        if self._conn is not None:
            return self._conn
        try:
            conn = sqlite3.connect(str(self.db_path), isolation_level=None)
            conn.executescript(CACHE_SCHEMA_SCRIPT)
        except sqlite3.Error as e:
            logger.error("Fatal error opening cache %s: %s", self.db_path, e, exc_info=True)
            raise
        self._conn = conn
        return conn

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None
            logger.debug("Cache '%s' closed.", self.cache_name)

    # --- CACHE OPERATIONS ---

    @staticmethod
    def make_key(url: str, accept: str = DEFAULT_ACCEPT, method: str = "GET") -> str:
        """Derives the lookup key for a request."""
        raw = f"{method.upper()} {accept} {url}"
        return hashlib.sha256(raw.encode("utf-8")).hexdigest()

    def get(self, url: str, accept: str = DEFAULT_ACCEPT) -> Optional[CachedResponse]:
        """Returns the stored response for the request, or None on a miss."""
        key = self.make_key(url, accept)
        row = self._get_connection().execute(
            "SELECT key, url, accept, status_code, body, fetched_at FROM responses WHERE key = ?",
            (key,)
        ).fetchone()
        if row is None:
            logger.debug("Cache miss: %s", url)
            return None

        logger.debug("Cache hit: %s", url)
        return CachedResponse(
            key=row[0],
            url=row[1],
            accept=row[2],
            status_code=row[3],
            body=row[4],
            fetched_at=datetime.fromisoformat(row[5]),
        )

    def put(self, url: str, body: str, accept: str = DEFAULT_ACCEPT, status_code: int = 200) -> CachedResponse:
        """Stores (or replaces) the response for the request."""
        entry = CachedResponse(
            key=self.make_key(url, accept), url=url, accept=accept,
            status_code=status_code, body=body
        )
        self._get_connection().execute(
            "INSERT OR REPLACE INTO responses (key, url, accept, status_code, body, fetched_at) "
            "VALUES (?, ?, ?, ?, ?, ?)",
            (entry.key, entry.url, entry.accept, entry.status_code, entry.body, entry.fetched_at.isoformat())
        )
        logger.debug("Cached %d chars for %s", len(body), url)
        return entry

    def clear(self) -> int:
        """Removes every entry; returns the number of removed entries."""
        cursor = self._get_connection().execute("DELETE FROM responses")
        logger.info("Cache '%s' cleared (%d entries).", self.cache_name, cursor.rowcount)
        return cursor.rowcount
