"""
SQL Post Store

Async SQLAlchemy 2.0 backend. Works with any async driver; defaults to
aiosqlite for a local file database.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from blog_api.core.exceptions import NotFoundError
from blog_api.models import Base, PostRecord
from blog_api.repositories.base import DraftLike, PatchLike, PostStore
from blog_api.schemas.posts import Post


class SqlPostStore(PostStore):
    """
    Post store persisted through an async SQLAlchemy engine.

    Each operation opens its own short-lived session. Every mutation is
    a single transaction taken under the writer lock, so a post is never
    observed half-updated.
    """

    backend = "sql"

    def __init__(self, engine: AsyncEngine) -> None:
        super().__init__()
        self._engine = engine
        # expire_on_commit=False: records stay readable after commit
        self._session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            engine, expire_on_commit=False
        )

    @classmethod
    def from_url(cls, url: str) -> SqlPostStore:
        return cls(create_async_engine(url, echo=False))

    async def create_schema(self) -> None:
        """Create the ``posts`` table if it does not exist."""
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self._engine.dispose()

    async def open(self) -> None:
        await self.create_schema()

    async def close(self) -> None:
        await self.dispose()

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------

    async def insert_many(self, drafts: Sequence[DraftLike]) -> list[Post]:
        validated = [self._validate_draft(d) for d in drafts]
        async with self._lock, self._session_factory() as session:
            if self._last_created is None:
                # Resume the stamp clock from rows written by earlier processes
                latest = await session.scalar(select(func.max(PostRecord.created)))
                if latest is not None:
                    self._last_created = (
                        latest if latest.tzinfo else latest.replace(tzinfo=UTC)
                    )
            posts = [self._build_post(d) for d in validated]
            session.add_all(PostRecord.from_domain(p) for p in posts)
            await session.commit()
        return posts

    async def update_by_id(self, post_id: str, partial: PatchLike) -> Post:
        async with self._lock, self._session_factory() as session:
            record = await session.get(PostRecord, post_id)
            if record is None:
                raise NotFoundError(post_id)
            updated = self._merge(record.to_domain(), self._validate_patch(partial))
            record.apply(updated)
            await session.commit()
        return updated

    async def delete_by_id(self, post_id: str) -> bool:
        async with self._lock, self._session_factory() as session:
            result = await session.execute(
                delete(PostRecord).where(PostRecord.id == post_id)
            )
            await session.commit()
        return result.rowcount > 0

    async def clear(self) -> None:
        async with self._lock, self._session_factory() as session:
            await session.execute(delete(PostRecord))
            await session.commit()

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------

    async def find_all(self) -> list[Post]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(PostRecord).order_by(PostRecord.created)
            )
            return [record.to_domain() for record in result.scalars().all()]

    async def find_by_id(self, post_id: str) -> Post | None:
        async with self._session_factory() as session:
            record = await session.get(PostRecord, post_id)
            return record.to_domain() if record is not None else None

    async def count(self) -> int:
        async with self._session_factory() as session:
            total = await session.scalar(select(func.count()).select_from(PostRecord))
            return total or 0
