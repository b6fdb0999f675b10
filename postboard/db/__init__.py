"""Postboard Database Module - SQLite database operations."""

from .connection import Database
from .models import Post
from .posts import PostRepository

__all__ = ["Database", "Post", "PostRepository"]
