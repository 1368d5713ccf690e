"""Repositories package."""

from blog_api.core.config import Settings
from blog_api.repositories.base import PostStore
from blog_api.repositories.memory import InMemoryPostStore
from blog_api.repositories.sql import SqlPostStore


def create_store(config: Settings) -> PostStore:
    """Build the store backend selected by ``STORE_BACKEND``."""
    if config.STORE_BACKEND == "sql":
        return SqlPostStore.from_url(config.DATABASE_URL)
    return InMemoryPostStore()


__all__ = [
    "InMemoryPostStore",
    "PostStore",
    "SqlPostStore",
    "create_store",
]
