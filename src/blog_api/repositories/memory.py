"""
In-Memory Post Store

Reference implementation of the store contract. Holds posts in an
insertion-ordered dict; used by default and throughout the test suite.
"""

from collections.abc import Sequence

from blog_api.core.exceptions import NotFoundError
from blog_api.repositories.base import DraftLike, PatchLike, PostStore
from blog_api.schemas.posts import Post


class InMemoryPostStore(PostStore):
    """
    Process-local post store.

    Posts are frozen pydantic models, so returned documents can be shared
    with callers without exposing store state to mutation.
    """

    backend = "memory"

    def __init__(self) -> None:
        super().__init__()
        self._posts: dict[str, Post] = {}

    async def insert_many(self, drafts: Sequence[DraftLike]) -> list[Post]:
        validated = [self._validate_draft(d) for d in drafts]
        async with self._lock:
            posts = [self._build_post(d) for d in validated]
            for post in posts:
                self._posts[post.id] = post
        return posts

    async def find_all(self) -> list[Post]:
        return list(self._posts.values())

    async def find_by_id(self, post_id: str) -> Post | None:
        return self._posts.get(post_id)

    async def update_by_id(self, post_id: str, partial: PatchLike) -> Post:
        async with self._lock:
            post = self._posts.get(post_id)
            if post is None:
                raise NotFoundError(post_id)
            updated = self._merge(post, self._validate_patch(partial))
            self._posts[post_id] = updated
        return updated

    async def delete_by_id(self, post_id: str) -> bool:
        async with self._lock:
            return self._posts.pop(post_id, None) is not None

    async def clear(self) -> None:
        async with self._lock:
            self._posts.clear()

    async def count(self) -> int:
        return len(self._posts)
