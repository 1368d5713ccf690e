"""
Posts API Router

REST endpoints for blog post CRUD operations.

Endpoints:
    GET    /posts       — List all posts (oldest first).
    GET    /posts/{id}  — Fetch one post.
    POST   /posts       — Create a post (201).
    PUT    /posts/{id}  — Partial update (204).
    DELETE /posts/{id}  — Idempotent delete (204).
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Request, Response, status

from blog_api.core.exceptions import NotFoundError, ValidationError
from blog_api.repositories import PostStore
from blog_api.schemas.posts import (
    PostDraft,
    PostListResponse,
    PostResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def get_store(request: Request) -> PostStore:
    """FastAPI dependency — returns the store bound to this app instance."""
    return request.app.state.store


@router.get("", response_model=PostListResponse)
async def list_posts(store: PostStore = Depends(get_store)) -> PostListResponse:
    """List every post under the ``posts`` key."""
    posts = sorted(await store.find_all(), key=lambda p: p.created)
    return PostListResponse(posts=[PostResponse.from_post(p) for p in posts])


@router.get("/{post_id}", response_model=PostResponse)
async def read_post(post_id: str, store: PostStore = Depends(get_store)) -> PostResponse:
    """Retrieve a single post by ID."""
    post = await store.find_by_id(post_id)
    if post is None:
        raise NotFoundError(post_id)
    return PostResponse.from_post(post)


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    draft: PostDraft, store: PostStore = Depends(get_store)
) -> PostResponse:
    """Create a post. Missing or empty fields are rejected with 400."""
    post = await store.insert_one(draft)
    logger.info("Created post %s", post.id)
    return PostResponse.from_post(post)


@router.put(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def update_post(
    post_id: str,
    partial: dict[str, Any] = Body(...),
    store: PostStore = Depends(get_store),
) -> Response:
    """
    Apply a partial update.

    A body ``id``, when given, must equal the path id (400 otherwise).
    Unknown ids yield 404 before any field is validated; the store
    validates the remaining fields against ``PostPatch``.
    """
    body_id = partial.get("id")
    if body_id is not None and body_id != post_id:
        raise ValidationError(
            f"Request path id ({post_id}) and request body id ({body_id}) must match"
        )
    await store.update_by_id(post_id, partial)
    logger.info("Updated post %s", post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_post(post_id: str, store: PostStore = Depends(get_store)) -> Response:
    """Delete a post. Responds 204 whether or not it existed."""
    removed = await store.delete_by_id(post_id)
    logger.info("Delete post %s (removed=%s)", post_id, removed)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
