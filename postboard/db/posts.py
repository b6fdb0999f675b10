"""
Postboard Post Database Operations

CRUD operations for the posts table.
"""

import logging
import sqlite3
from typing import Optional

from .connection import Database
from .models import Post
from ..utils.formatting import utc_timestamp

logger = logging.getLogger(__name__)

# Largest value SQLite can bind as an INTEGER
MAX_POST_ID = 2**63 - 1


def _in_range(post_id: int) -> bool:
    """Only positive ids that SQLite can bind may name a stored post."""
    return 0 < post_id <= MAX_POST_ID


class PostRepository:
    """Repository for post-related database operations."""

    def __init__(self, db: Database):
        self.db = db

    def list_all(self) -> list[Post]:
        """Get all posts, oldest first. Passwords are not read."""
        rows = self.db.fetchall(
            "SELECT id, title, content, created_at FROM posts ORDER BY id"
        )
        return [self._row_to_post(row) for row in rows]

    def get_by_id(self, post_id: int) -> Optional[Post]:
        """Get post by ID, including the stored password hash."""
        if not _in_range(post_id):
            return None
        row = self.db.fetchone(
            "SELECT id, title, content, password, created_at FROM posts WHERE id = ?",
            (post_id,)
        )
        return self._row_to_post(row) if row else None

    def insert(self, title: str, content: str, password_hash: str) -> Post:
        """Create a new post."""
        created_at = utc_timestamp()

        cursor = self.db.execute("""
            INSERT INTO posts (title, content, password, created_at)
            VALUES (?, ?, ?, ?)
        """, (title, content, password_hash, created_at))

        logger.debug(f"Inserted post {cursor.lastrowid}")

        return Post(
            id=cursor.lastrowid,
            title=title,
            content=content,
            password=password_hash,
            created_at=created_at
        )

    def update(self, post_id: int, title: str, content: str) -> bool:
        """Update title and content of a post. Password and timestamp stay."""
        if not _in_range(post_id):
            return False
        cursor = self.db.execute(
            "UPDATE posts SET title = ?, content = ? WHERE id = ?",
            (title, content, post_id)
        )
        return cursor.rowcount > 0

    def update_password_hash(self, post_id: int, password_hash: str) -> bool:
        """Replace the stored hash (same password, new parameters)."""
        if not _in_range(post_id):
            return False
        cursor = self.db.execute(
            "UPDATE posts SET password = ? WHERE id = ?",
            (password_hash, post_id)
        )
        return cursor.rowcount > 0

    def delete(self, post_id: int) -> bool:
        """Delete a post."""
        if not _in_range(post_id):
            return False
        cursor = self.db.execute("DELETE FROM posts WHERE id = ?", (post_id,))
        return cursor.rowcount > 0

    def _row_to_post(self, row: sqlite3.Row) -> Post:
        """Convert database row to Post object."""
        keys = row.keys()
        return Post(
            id=row["id"],
            title=row["title"],
            content=row["content"],
            password=row["password"] if "password" in keys else "",
            created_at=row["created_at"]
        )
