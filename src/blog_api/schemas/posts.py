"""
Post Schemas

Pydantic models for the blog post resource.
Separates concerns: PostDraft (input), Post (stored document),
PostPatch (partial update), PostResponse (wire output).
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Author(BaseModel):
    """
    Structured author name.

    Stored as a ``{firstName, lastName}`` pair, serialized on the wire
    as a single "First Last" string (see ``full_name``).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    first_name: str = Field(..., alias="firstName", min_length=1)
    last_name: str = Field(..., alias="lastName", min_length=1)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class AuthorPatch(BaseModel):
    """Author sub-fields for partial updates. Absent fields keep their value."""

    model_config = ConfigDict(populate_by_name=True)

    first_name: str | None = Field(None, alias="firstName", min_length=1)
    last_name: str | None = Field(None, alias="lastName", min_length=1)


class PostDraft(BaseModel):
    """Request schema for POST /posts, and the store's insert payload."""

    title: str = Field(..., min_length=1, description="Post title")
    author: Author
    content: str = Field(..., min_length=1, description="Post body")


class PostPatch(BaseModel):
    """
    Partial update payload, validated by the store once the target post
    is known to exist.

    All fields optional to support partial updates. ``id`` is only
    compared against the path id; stores never apply it.
    """

    id: str | None = None
    title: str | None = Field(None, min_length=1)
    content: str | None = Field(None, min_length=1)
    author: AuthorPatch | None = None


class Post(BaseModel):
    """
    Stored blog post document.

    Attributes:
        id: Opaque unique identifier, assigned by the store.
        title: Post title.
        author: Structured author name.
        content: Post body.
        created: UTC insertion timestamp, assigned by the store.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    author: Author
    content: str
    created: datetime


class PostResponse(BaseModel):
    """Wire representation of a post (author flattened to one string)."""

    id: str
    created: datetime
    author: str
    content: str
    title: str

    @classmethod
    def from_post(cls, post: Post) -> "PostResponse":
        return cls(
            id=post.id,
            created=post.created,
            author=post.author.full_name,
            content=post.content,
            title=post.title,
        )


class PostListResponse(BaseModel):
    """Response schema for GET /posts."""

    posts: list[PostResponse]
