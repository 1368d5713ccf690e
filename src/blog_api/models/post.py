"""
Post Model

Persistent storage for blog post documents. The author pair is kept as
a JSON document column rather than being split into relational columns.
"""

from datetime import UTC, datetime

from sqlalchemy import JSON, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from blog_api.models.base import Base
from blog_api.schemas.posts import Author, Post


class PostRecord(Base):
    """
    Post row.

    Attributes:
        id: 32-char hex identifier (generated Python-side by the store).
        title: Post title.
        author: ``{"firstName": ..., "lastName": ...}`` document.
        content: Post body.
        created: Insertion timestamp, indexed for ordered listing.
    """

    __tablename__ = "posts"

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    author: Mapped[dict[str, str]] = mapped_column(JSON, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    created: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
    )

    @classmethod
    def from_domain(cls, post: Post) -> "PostRecord":
        return cls(
            id=post.id,
            title=post.title,
            author=post.author.model_dump(by_alias=True),
            content=post.content,
            created=post.created,
        )

    def to_domain(self) -> Post:
        created = self.created
        # SQLite drops tzinfo on read; values are always written in UTC
        if created.tzinfo is None:
            created = created.replace(tzinfo=UTC)
        return Post(
            id=self.id,
            title=self.title,
            author=Author.model_validate(self.author),
            content=self.content,
            created=created,
        )

    def apply(self, post: Post) -> None:
        """Copy mutable fields from ``post``. A fresh dict marks the JSON column dirty."""
        self.title = post.title
        self.content = post.content
        self.author = post.author.model_dump(by_alias=True)

    def __repr__(self) -> str:
        return f"<PostRecord(id={self.id}, title='{self.title[:20]}...')>"
