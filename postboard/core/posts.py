"""
Postboard Post Service

Handles listing, reading, creating, editing and deleting posts, with the
post password checked before any edit or delete.
"""

import logging

from ..db.posts import PostRepository
from ..errors import AuthorizationError, NotFound
from .crypto import CryptoManager
from .requests import CreatePostRequest, DeletePostRequest, UpdatePostRequest

logger = logging.getLogger(__name__)


class PostService:
    """
    Post service for Postboard.

    Edits and deletes always run in the same order: the post must exist,
    then the password must match, then the row is changed. A missing post
    is reported as NotFound whatever password was supplied.
    """

    def __init__(self, repo: PostRepository, crypto: CryptoManager):
        self.repo = repo
        self.crypto = crypto

    def list_posts(self) -> list[dict]:
        """List all posts without passwords."""
        return [post.to_public_dict() for post in self.repo.list_all()]

    def get_post(self, post_id: int) -> dict:
        """Read one post without its password."""
        post = self.repo.get_by_id(post_id)
        if not post:
            raise NotFound()
        return post.to_public_dict()

    def create_post(self, request: CreatePostRequest) -> dict:
        """Store a new post, hashing its password first."""
        password_hash = self.crypto.hash_password(request.password)
        post = self.repo.insert(request.title, request.content, password_hash)

        logger.info(f"Post {post.id} created")
        return post.to_public_dict()

    def update_post(self, post_id: int, request: UpdatePostRequest) -> dict:
        """Change title and content of a post after checking its password."""
        post = self._authorize(post_id, request.password, "update")

        new_hash = None
        if self.crypto.needs_rehash(post.password):
            new_hash = self.crypto.hash_password(request.password)

        # Edit and rehash land together or not at all
        with self.repo.db.transaction():
            if not self.repo.update(post_id, request.title, request.content):
                # Deleted between the check and the write
                raise NotFound()
            if new_hash:
                self.repo.update_password_hash(post_id, new_hash)
                logger.debug(f"Post {post_id} password rehashed")

        logger.info(f"Post {post_id} updated")
        post.title = request.title
        post.content = request.content
        return post.to_public_dict()

    def delete_post(self, post_id: int, request: DeletePostRequest) -> None:
        """Remove a post after checking its password."""
        self._authorize(post_id, request.password, "delete")

        if not self.repo.delete(post_id):
            raise NotFound()

        logger.info(f"Post {post_id} deleted")

    def _authorize(self, post_id: int, password: str, action: str):
        """Return the stored post if it exists and the password matches."""
        post = self.repo.get_by_id(post_id)
        if not post:
            raise NotFound()

        if not self.crypto.verify_password(password, post.password):
            logger.warning(f"Rejected {action} of post {post_id}: wrong password")
            raise AuthorizationError()

        return post
