"""
Base Post Store

Abstract contract shared by every post store backend, plus the draft and
patch handling that must behave identically across them.
"""

import asyncio
import uuid
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from datetime import UTC, datetime
from typing import Any

import pydantic

from blog_api.core.exceptions import ValidationError
from blog_api.schemas.posts import Post, PostDraft, PostPatch

DraftLike = PostDraft | Mapping[str, Any]
PatchLike = PostPatch | Mapping[str, Any]


class PostStore(ABC):
    """
    Collection of blog post documents keyed by a generated id.

    Guarantees:
        - ``id`` is unique for the lifetime of the store.
        - ``created`` never decreases in insertion order.
        - Mutations are serialized through a single writer lock.

    Stores never log or retry; errors surface to the caller as
    ``ValidationError`` or ``NotFoundError``.
    """

    backend: str = "abstract"

    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._last_created: datetime | None = None

    # ------------------------------------------------------------------
    # Lifecycle hooks (no-op unless the backend holds resources)
    # ------------------------------------------------------------------

    async def open(self) -> None:
        """Prepare backing resources before serving requests."""

    async def close(self) -> None:
        """Release backing resources."""

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    @abstractmethod
    async def insert_many(self, drafts: Sequence[DraftLike]) -> list[Post]:
        """
        Insert drafts in order, assigning ``id`` and ``created``.

        Raises:
            ValidationError: If any draft is missing a required field.
                Nothing is inserted in that case.
        """

    async def insert_one(self, draft: DraftLike) -> Post:
        [post] = await self.insert_many([draft])
        return post

    @abstractmethod
    async def find_all(self) -> list[Post]:
        """Return all posts, oldest first."""

    @abstractmethod
    async def find_by_id(self, post_id: str) -> Post | None:
        """Return the post with ``post_id``, or None if absent."""

    @abstractmethod
    async def update_by_id(self, post_id: str, partial: PatchLike) -> Post:
        """
        Merge ``partial`` into an existing post.

        Only fields present in ``partial`` change; author sub-fields are
        merged individually. ``id`` and ``created`` are never modified.

        Raises:
            NotFoundError: If no post has ``post_id``.
            ValidationError: If ``partial`` is malformed.
        """

    @abstractmethod
    async def delete_by_id(self, post_id: str) -> bool:
        """Remove a post. Returns False if it did not exist."""

    @abstractmethod
    async def clear(self) -> None:
        """Remove every post."""

    @abstractmethod
    async def count(self) -> int:
        """Number of stored posts."""

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _validate_draft(draft: DraftLike) -> PostDraft:
        if isinstance(draft, PostDraft):
            return draft
        try:
            return PostDraft.model_validate(draft)
        except pydantic.ValidationError as e:
            raise ValidationError.from_pydantic(e) from e

    @staticmethod
    def _validate_patch(partial: PatchLike) -> PostPatch:
        if isinstance(partial, PostPatch):
            return partial
        try:
            return PostPatch.model_validate(partial)
        except pydantic.ValidationError as e:
            raise ValidationError.from_pydantic(e) from e

    def _stamp(self) -> datetime:
        """Monotonic UTC timestamp: never earlier than the previous one."""
        now = datetime.now(UTC)
        if self._last_created is not None and now < self._last_created:
            now = self._last_created
        self._last_created = now
        return now

    def _build_post(self, draft: PostDraft) -> Post:
        return Post(
            id=uuid.uuid4().hex,
            title=draft.title,
            author=draft.author,
            content=draft.content,
            created=self._stamp(),
        )

    @staticmethod
    def _merge(post: Post, patch: PostPatch) -> Post:
        changes: dict[str, Any] = patch.model_dump(
            exclude_none=True, exclude={"id", "author"}
        )
        if patch.author is not None:
            changes["author"] = post.author.model_copy(
                update=patch.author.model_dump(exclude_none=True)
            )
        return post.model_copy(update=changes)
