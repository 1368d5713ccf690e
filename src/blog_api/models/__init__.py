"""Models package - re-exports all models for convenient imports."""

from blog_api.models.base import Base
from blog_api.models.post import PostRecord

__all__ = [
    "Base",
    "PostRecord",
]
