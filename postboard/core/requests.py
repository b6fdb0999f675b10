"""
Postboard Request Types

One dataclass per mutating operation. ``from_dict`` checks required fields
once, before anything touches storage.
"""

from dataclasses import dataclass
from typing import Any, Mapping

from ..errors import ValidationError


def _require_text(data: Mapping[str, Any], name: str, strip: bool = True) -> str:
    """
    Pull a non-empty string field out of a request body.

    With ``strip`` the value is trimmed and must have visible text;
    without it the value is kept verbatim and only the empty string is
    rejected.
    """
    value = data.get(name)
    if value is None:
        raise ValidationError.missing(name)
    if not isinstance(value, str):
        raise ValidationError(f"Field must be a string: {name}", field=name)
    if strip:
        value = value.strip()
    if not value:
        raise ValidationError.missing(name)
    return value


def _require_mapping(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValidationError("Request body must be a JSON object")
    return data


@dataclass(frozen=True)
class CreatePostRequest:
    """Input for creating a post."""
    title: str
    content: str
    password: str

    @classmethod
    def from_dict(cls, data: Any) -> "CreatePostRequest":
        data = _require_mapping(data)
        return cls(
            title=_require_text(data, "title"),
            content=_require_text(data, "content"),
            password=_require_text(data, "password", strip=False)
        )


@dataclass(frozen=True)
class UpdatePostRequest:
    """Input for editing a post's title and content."""
    title: str
    content: str
    password: str

    @classmethod
    def from_dict(cls, data: Any) -> "UpdatePostRequest":
        data = _require_mapping(data)
        return cls(
            title=_require_text(data, "title"),
            content=_require_text(data, "content"),
            password=_require_text(data, "password", strip=False)
        )


@dataclass(frozen=True)
class DeletePostRequest:
    """Input for deleting a post."""
    password: str

    @classmethod
    def from_dict(cls, data: Any) -> "DeletePostRequest":
        data = _require_mapping(data)
        return cls(password=_require_text(data, "password", strip=False))
