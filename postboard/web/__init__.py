"""Postboard Web Module - Flask HTTP binding for the post service."""

from .app import create_app, build_service

__all__ = ["create_app", "build_service"]
