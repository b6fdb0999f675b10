"""
Postboard HTTP Binding

Flask application exposing the post service as a JSON API. Each route
pulls its parameters out of the request, makes one service call and
relays the result; errors are turned into JSON bodies by the handlers
registered in ``create_app``.
"""

import logging
from typing import Any, Optional

from flask import Blueprint, Flask, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from ..config import Config
from ..core.crypto import CryptoManager
from ..core.posts import PostService
from ..core.requests import CreatePostRequest, DeletePostRequest, UpdatePostRequest
from ..db.connection import Database
from ..db.posts import PostRepository
from ..errors import PostboardError, StorageFailure, ValidationError

logger = logging.getLogger(__name__)

SERVICE_KEY = "postboard.service"

api = Blueprint("api", __name__, url_prefix="/api")


def build_service(config: Config) -> PostService:
    """Open the configured database and wire up a post service."""
    db = Database(config.database.path)
    db.initialize()

    crypto = CryptoManager(
        time_cost=config.crypto.argon2_time_cost,
        memory_cost_kb=config.crypto.argon2_memory_kb,
        parallelism=config.crypto.argon2_parallelism
    )
    return PostService(PostRepository(db), crypto)


def create_app(
    config: Optional[Config] = None,
    service: Optional[PostService] = None
) -> Flask:
    """
    Create the Flask application.

    Args:
        config: Settings used to build a service when none is given
        service: Ready post service (tests pass one over an in-memory db)
    """
    config = config or Config()
    if service is None:
        service = build_service(config)

    app = Flask(__name__)
    app.extensions[SERVICE_KEY] = service

    app.register_blueprint(api)
    app.register_error_handler(PostboardError, _handle_postboard_error)
    app.register_error_handler(HTTPException, _handle_http_error)
    app.register_error_handler(Exception, _handle_unexpected_error)

    return app


def _service() -> PostService:
    return current_app.extensions[SERVICE_KEY]


def _request_body() -> Any:
    """Return the JSON or form body of the current request."""
    if request.is_json:
        data = request.get_json(silent=True)
        if data is None:
            raise ValidationError("Malformed JSON body")
        return data
    if request.form:
        return request.form
    return {}


@api.get("/posts")
def list_posts():
    return jsonify(_service().list_posts())


@api.get("/post/<int:post_id>")
def get_post(post_id: int):
    return jsonify(_service().get_post(post_id))


@api.post("/posts")
def create_post():
    post = _service().create_post(CreatePostRequest.from_dict(_request_body()))
    return jsonify({"message": "Post created successfully", "id": post["id"]}), 201


@api.put("/posts/<int:post_id>")
def update_post(post_id: int):
    _service().update_post(post_id, UpdatePostRequest.from_dict(_request_body()))
    return jsonify({"message": "Post updated successfully"})


@api.delete("/posts/<int:post_id>")
def delete_post(post_id: int):
    _service().delete_post(post_id, DeletePostRequest.from_dict(_request_body()))
    return jsonify({"message": "Post deleted successfully"})


def _handle_postboard_error(error: PostboardError):
    if isinstance(error, StorageFailure):
        logger.error(f"{request.method} {request.path} failed: {error.__cause__ or error}")
    return jsonify({"error": error.message}), error.status_code


def _handle_http_error(error: HTTPException):
    return jsonify({"error": error.description}), error.code


def _handle_unexpected_error(error: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.path}")
    return jsonify({"error": "Internal server error"}), 500
