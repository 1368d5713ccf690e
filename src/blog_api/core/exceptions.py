"""
Domain Exceptions

Errors raised by post stores. They carry no transport details; the API
layer maps them to status codes (see ``blog_api.api.errors``).
"""

from collections.abc import Iterable, Mapping
from typing import Any

import pydantic


class PostStoreError(Exception):
    """Base class for all store errors."""


class ValidationError(PostStoreError):
    """Malformed or missing input (maps to HTTP 400)."""

    def __init__(self, messages: str | Iterable[str]):
        if isinstance(messages, str):
            messages = [messages]
        self.messages = list(messages)
        super().__init__("; ".join(self.messages))

    @classmethod
    def from_errors(cls, errors: Iterable[Mapping[str, Any]]) -> "ValidationError":
        """Flatten pydantic-style error dicts into ``"field.path: message"`` strings."""
        return cls(
            f"{'.'.join(str(loc) for loc in err['loc']) or 'body'}: {err['msg']}"
            for err in errors
        )

    @classmethod
    def from_pydantic(cls, exc: pydantic.ValidationError) -> "ValidationError":
        return cls.from_errors(exc.errors())


class NotFoundError(PostStoreError):
    """Referenced post id is absent from the store (maps to HTTP 404)."""

    def __init__(self, post_id: str):
        self.post_id = post_id
        super().__init__(f"Post {post_id!r} not found")
