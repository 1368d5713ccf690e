"""
Seed/Teardown Harness

Generates random valid post drafts with Faker and loads them into a store.
Used by the test suite and by ``scripts/seed_posts.py``.
"""

import logging

from faker import Faker

from blog_api.repositories import PostStore
from blog_api.schemas.posts import Author, Post, PostDraft

logger = logging.getLogger(__name__)


def random_draft(faker: Faker) -> PostDraft:
    """Build one random, valid draft."""
    return PostDraft(
        title=faker.sentence(),
        author=Author(first_name=faker.first_name(), last_name=faker.last_name()),
        content=faker.paragraph(nb_sentences=5),
    )


class PostSeeder:
    """
    Seeds and wipes a post store.

    Args:
        store: Store to operate on.
        faker: Faker instance to draw from (a fresh one if omitted).
        seed: Optional seed for reproducible drafts.
    """

    def __init__(
        self,
        store: PostStore,
        faker: Faker | None = None,
        seed: int | None = None,
    ) -> None:
        self.store = store
        self.faker = faker or Faker()
        if seed is not None:
            self.faker.seed_instance(seed)

    def make_draft(self) -> PostDraft:
        return random_draft(self.faker)

    async def seed(self, count: int) -> list[Post]:
        """Insert ``count`` random posts and return them."""
        if count < 1:
            raise ValueError(f"count must be a positive integer, got {count}")
        posts = await self.store.insert_many([self.make_draft() for _ in range(count)])
        logger.info("Seeded %d posts", len(posts))
        return posts

    async def reset(self) -> None:
        """Remove every post from the store."""
        await self.store.clear()
        logger.debug("Store reset")
