"""
Postboard Data Models

Dataclasses representing database entities.
"""

from dataclasses import dataclass
from typing import Optional

PUBLIC_FIELDS = ("id", "title", "content", "created_at")


@dataclass
class Post:
    """Bulletin post.

    ``password`` holds the stored Argon2 hash. It is left empty when a row
    is read without it (listings) and is never part of ``to_public_dict``.
    """
    id: Optional[int] = None
    title: str = ""
    content: str = ""
    password: str = ""
    created_at: str = ""

    def to_public_dict(self) -> dict:
        """Serialize for clients, without the password."""
        return {name: getattr(self, name) for name in PUBLIC_FIELDS}
