"""Persisted access-token storage using SQLite."""
import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Optional
from financefreedom.config import settings


class TokenStore:
    """
    Application-private key-value store holding the access token.

    Values live in a `preferences` table keyed by (preference name, key).
    """

    def __init__(
        self,
        db_path: Optional[str] = None,
        prefs_name: Optional[str] = None,
        key: Optional[str] = None,
    ):
        self.db_path = db_path or settings.token_store_path
        self.prefs_name = prefs_name or settings.prefs_name
        self.key = key or settings.token_key
        self._init_db()

    def _init_db(self):
        """Initialize database tables."""
        with self._get_conn() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS preferences (
                    name TEXT NOT NULL,
                    key TEXT NOT NULL,
                    value TEXT NOT NULL,
                    updated_at TEXT NOT NULL,
                    PRIMARY KEY (name, key)
                )
            """)
            conn.commit()

    @contextmanager
    def _get_conn(self):
        """Get database connection."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
        finally:
            conn.close()

    def save_token(self, token: str) -> None:
        """Store the token, replacing any previous one."""
        with self._get_conn() as conn:
            conn.execute("""
                INSERT OR REPLACE INTO preferences (name, key, value, updated_at)
                VALUES (?, ?, ?, ?)
            """, (
                self.prefs_name,
                self.key,
                token,
                datetime.now(timezone.utc).isoformat(),
            ))
            conn.commit()

    def get_token(self) -> Optional[str]:
        """Return the stored token, or None."""
        with self._get_conn() as conn:
            row = conn.execute("""
                SELECT value FROM preferences
                WHERE name = ? AND key = ?
            """, (self.prefs_name, self.key)).fetchone()
            return row["value"] if row else None

    def clear_token(self) -> None:
        """Remove the stored token."""
        with self._get_conn() as conn:
            conn.execute(
                "DELETE FROM preferences WHERE name = ? AND key = ?",
                (self.prefs_name, self.key),
            )
            conn.commit()
