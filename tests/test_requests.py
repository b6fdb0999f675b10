"""
Tests for Postboard request validation
"""

import pytest

from postboard.core.requests import CreatePostRequest, DeletePostRequest, UpdatePostRequest
from postboard.errors import ValidationError


class TestCreatePostRequest:
    """Tests for create request parsing."""

    def test_valid_body(self):
        """Test a complete body is accepted."""
        req = CreatePostRequest.from_dict(
            {"title": "Hello", "content": "World", "password": "secret"}
        )

        assert req.title == "Hello"
        assert req.content == "World"
        assert req.password == "secret"

    def test_title_and_content_trimmed(self):
        """Test surrounding whitespace is dropped from text fields only."""
        req = CreatePostRequest.from_dict(
            {"title": "  Hello ", "content": "\nWorld\n", "password": " pw "}
        )

        assert req.title == "Hello"
        assert req.content == "World"
        assert req.password == " pw "

    @pytest.mark.parametrize("field", ["title", "content", "password"])
    def test_missing_field(self, field):
        """Test each required field is enforced."""
        body = {"title": "Hello", "content": "World", "password": "secret"}
        del body[field]

        with pytest.raises(ValidationError) as exc_info:
            CreatePostRequest.from_dict(body)

        assert exc_info.value.field == field
        assert exc_info.value.message == f"Missing required field: {field}"
        assert exc_info.value.status_code == 400

    def test_blank_field(self):
        """Test whitespace-only values count as missing."""
        with pytest.raises(ValidationError) as exc_info:
            CreatePostRequest.from_dict(
                {"title": "   ", "content": "World", "password": "secret"}
            )

        assert exc_info.value.field == "title"

    def test_non_string_field(self):
        """Test values of the wrong type are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            CreatePostRequest.from_dict(
                {"title": "Hello", "content": 42, "password": "secret"}
            )

        assert exc_info.value.field == "content"

    def test_body_not_an_object(self):
        """Test a JSON array or scalar body is rejected."""
        with pytest.raises(ValidationError):
            CreatePostRequest.from_dict(["Hello", "World", "secret"])

        with pytest.raises(ValidationError):
            CreatePostRequest.from_dict(None)


class TestUpdateAndDeleteRequests:
    """Tests for update and delete request parsing."""

    def test_update_requires_password(self):
        """Test update without password fails."""
        with pytest.raises(ValidationError) as exc_info:
            UpdatePostRequest.from_dict({"title": "Hi", "content": "There"})

        assert exc_info.value.field == "password"

    def test_delete_requires_password(self):
        """Test delete with empty password fails."""
        with pytest.raises(ValidationError):
            DeletePostRequest.from_dict({"password": ""})

    def test_whitespace_password_kept(self):
        """Test a password of spaces is valid and kept exactly."""
        req = DeletePostRequest.from_dict({"password": "   "})

        assert req.password == "   "

    def test_delete_ignores_extra_fields(self):
        """Test unknown keys are ignored."""
        req = DeletePostRequest.from_dict({"password": "secret", "title": "x"})

        assert req.password == "secret"
