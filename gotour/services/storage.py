"""
KeyValueStore - Local persistence for edits and preferences.

Stores string values in ~/.gotour/storage.db:
- "imports" and "syntax" display preferences ("true"/"false")
- One entry per file content hash holding the student's edited code

If the database cannot be opened, open_store() hands back a NullStore so
callers never have to tell "disabled" apart from "empty".
"""

import logging
import sqlite3
from pathlib import Path
from typing import Optional, Protocol

from gotour.config import DEFAULT_STORE_PATH


logger = logging.getLogger(__name__)

PROBE_KEY = "__gotour_probe__"


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value) -> None: ...

    def delete(self, key: str) -> None: ...


def _to_text(value) -> str:
    """Stringify like the browser does: booleans become "true"/"false"."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class LocalStore:
    """
    Persist key/value pairs in SQLite.

    Each call opens its own connection, like the rest of the package's
    SQLite access, so the store can be shared between threads.
    """

    def __init__(self, db_path: Optional[Path] = None):
        """
        Initialize the store and probe the database.

        Args:
            db_path: Path to storage.db (default: ~/.gotour/storage.db)

        Raises:
            sqlite3.Error, OSError: If the database is not usable
        """
        self.db_path = Path(db_path) if db_path else DEFAULT_STORE_PATH
        self._ensure_database()
        self._probe()

    def _ensure_database(self):
        """Create database and table if they don't exist."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        conn = sqlite3.connect(str(self.db_path))
        try:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
            """)
            conn.commit()
        finally:
            conn.close()

    def _probe(self):
        """Write and remove a value so read-only files fail here, not later."""
        self.set(PROBE_KEY, "1")
        self.delete(PROBE_KEY)

    def _get_connection(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self.db_path))
        conn.row_factory = sqlite3.Row
        return conn

    def get(self, key: str) -> Optional[str]:
        conn = self._get_connection()
        try:
            cursor = conn.execute("SELECT value FROM kv WHERE key = ?", (key,))
            row = cursor.fetchone()
            return row["value"] if row else None
        finally:
            conn.close()

    def set(self, key: str, value):
        conn = self._get_connection()
        try:
            conn.execute(
                """INSERT INTO kv (key, value) VALUES (?, ?)
                   ON CONFLICT(key) DO UPDATE SET value = excluded.value""",
                (key, _to_text(value))
            )
            conn.commit()
        finally:
            conn.close()

    def delete(self, key: str):
        conn = self._get_connection()
        try:
            conn.execute("DELETE FROM kv WHERE key = ?", (key,))
            conn.commit()
        finally:
            conn.close()


class MemoryStore:
    """Keep values in a dict for the lifetime of the process."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data = {k: _to_text(v) for k, v in (initial or {}).items()}

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value):
        self._data[key] = _to_text(value)

    def delete(self, key: str):
        self._data.pop(key, None)


class NullStore:
    """Store used when persistence is unavailable: remembers nothing."""

    def get(self, key: str) -> Optional[str]:
        return None

    def set(self, key: str, value):
        pass

    def delete(self, key: str):
        pass


def open_store(db_path: Optional[Path] = None) -> KeyValueStore:
    """
    Open the local store, falling back to NullStore.

    Args:
        db_path: Path to storage.db (default: ~/.gotour/storage.db)

    Returns:
        LocalStore if the database is usable, otherwise NullStore
    """
    try:
        return LocalStore(db_path)
    except (sqlite3.Error, OSError) as e:
        logger.warning(f"Local storage unavailable ({e}); edits will not be saved")
        return NullStore()
