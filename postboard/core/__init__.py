"""Postboard Core Module - Password guard, request types and post service."""

from .crypto import CryptoManager
from .posts import PostService
from .requests import CreatePostRequest, UpdatePostRequest, DeletePostRequest

__all__ = [
    "CryptoManager",
    "PostService",
    "CreatePostRequest",
    "UpdatePostRequest",
    "DeletePostRequest",
]
