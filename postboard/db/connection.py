"""
Postboard Database Connection Manager

SQLite database with WAL mode for concurrent reads.
"""

import sqlite3
import logging
import threading
import time
from pathlib import Path
from contextlib import contextmanager
from typing import Optional, Generator

from ..errors import StorageFailure

logger = logging.getLogger(__name__)

MEMORY_PATH = ":memory:"


class Database:
    """
    SQLite database manager for Postboard.

    One connection is shared by all request threads; statements are
    serialized through an internal lock. Driver errors surface as
    StorageFailure.
    """

    def __init__(self, path: str):
        """
        Initialize database connection.

        Args:
            path: Path to SQLite database file, or ":memory:"
        """
        self.path = path
        self._conn: Optional[sqlite3.Connection] = None
        self._lock = threading.RLock()

    @property
    def in_memory(self) -> bool:
        return self.path == MEMORY_PATH

    def initialize(self):
        """Initialize database connection and schema."""
        try:
            if not self.in_memory:
                Path(self.path).parent.mkdir(parents=True, exist_ok=True)

            self._conn = sqlite3.connect(
                self.path,
                check_same_thread=False,
                isolation_level=None  # Autocommit mode
            )

            if not self.in_memory:
                # WAL lets readers proceed while a write is in flight
                self._conn.execute("PRAGMA journal_mode=WAL")

            self._conn.row_factory = sqlite3.Row

            self._run_migrations()
        except (sqlite3.Error, OSError) as e:
            logger.error(f"Database initialization failed: {e}")
            raise StorageFailure() from e

        logger.info(f"Database initialized: {self.path}")

    def _run_migrations(self):
        """Run database migrations."""
        self._conn.execute("""
            CREATE TABLE IF NOT EXISTS _migrations (
                id INTEGER PRIMARY KEY,
                name TEXT UNIQUE NOT NULL,
                applied_at INTEGER NOT NULL
            )
        """)

        applied = {
            row[0] for row in
            self._conn.execute("SELECT name FROM _migrations").fetchall()
        }

        migrations = [
            ("001_initial", self._migration_001_initial),
        ]

        for name, func in migrations:
            if name not in applied:
                logger.info(f"Running migration: {name}")
                func()
                self._conn.execute(
                    "INSERT INTO _migrations (name, applied_at) VALUES (?, ?)",
                    (name, int(time.time() * 1_000_000))
                )

    def _migration_001_initial(self):
        """Initial database schema."""
        # AUTOINCREMENT keeps ids of deleted posts from being handed out again
        self._conn.executescript("""
            CREATE TABLE IF NOT EXISTS posts (
                id              INTEGER PRIMARY KEY AUTOINCREMENT,
                title           TEXT NOT NULL,
                content         TEXT NOT NULL,
                password        TEXT NOT NULL,
                created_at      TEXT NOT NULL
            );
        """)

    def _require_connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise StorageFailure("Database is not open")
        return self._conn

    @contextmanager
    def transaction(self) -> Generator[sqlite3.Connection, None, None]:
        """Context manager for database transactions."""
        with self._lock:
            conn = self._require_connection()
            try:
                conn.execute("BEGIN")
            except sqlite3.Error as e:
                raise StorageFailure() from e
            try:
                yield conn
                conn.execute("COMMIT")
            except Exception as e:
                try:
                    conn.execute("ROLLBACK")
                except sqlite3.Error:
                    logger.error("Rollback failed")
                if isinstance(e, sqlite3.Error):
                    raise StorageFailure() from e
                raise

    def execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        """Execute SQL query."""
        with self._lock:
            conn = self._require_connection()
            try:
                return conn.execute(sql, params)
            except sqlite3.Error as e:
                logger.error(f"Statement failed: {e}")
                raise StorageFailure() from e

    def fetchone(self, sql: str, params: tuple = ()) -> Optional[sqlite3.Row]:
        """Execute query and fetch one result."""
        with self._lock:
            conn = self._require_connection()
            try:
                return conn.execute(sql, params).fetchone()
            except sqlite3.Error as e:
                logger.error(f"Query failed: {e}")
                raise StorageFailure() from e

    def fetchall(self, sql: str, params: tuple = ()) -> list[sqlite3.Row]:
        """Execute query and fetch all results."""
        with self._lock:
            conn = self._require_connection()
            try:
                return conn.execute(sql, params).fetchall()
            except sqlite3.Error as e:
                logger.error(f"Query failed: {e}")
                raise StorageFailure() from e

    def close(self):
        """Close database connection."""
        with self._lock:
            if self._conn:
                self._conn.close()
                self._conn = None
                logger.info("Database connection closed")

    # === Utility Methods ===

    def count_posts(self) -> int:
        """Count stored posts."""
        row = self.fetchone("SELECT COUNT(*) FROM posts")
        return row[0] if row else 0
