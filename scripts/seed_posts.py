#!/usr/bin/env python3
"""
Seed Blog Posts

Creates random posts on a running Blog Posts API through its HTTP surface.

Usage:
    python scripts/seed_posts.py
    python scripts/seed_posts.py --count 25
    python scripts/seed_posts.py --clean  # Delete all posts first
"""

from __future__ import annotations

import argparse
import logging
import sys

import httpx
from faker import Faker

from blog_api.core.logging import setup_logging
from blog_api.services.seeding import random_draft

DEFAULT_API_URL = "http://localhost:8000"
TIMEOUT = 10.0

logger = logging.getLogger("blog_api.scripts.seed_posts")


def check_api(client: httpx.Client) -> bool:
    try:
        return client.get("/health").status_code == 200
    except httpx.RequestError:
        return False


def delete_all_posts(client: httpx.Client) -> int:
    """Delete every existing post. Returns how many were deleted."""
    r = client.get("/posts")
    r.raise_for_status()
    posts = r.json()["posts"]
    for post in posts:
        client.delete(f"/posts/{post['id']}").raise_for_status()
    return len(posts)


def create_posts(client: httpx.Client, count: int, faker: Faker) -> list[str]:
    """Create ``count`` random posts. Returns the new ids."""
    ids = []
    for _ in range(count):
        draft = random_draft(faker)
        r = client.post("/posts", json=draft.model_dump(by_alias=True))
        r.raise_for_status()
        ids.append(r.json()["id"])
    return ids


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed posts into the Blog Posts API")
    parser.add_argument("--api-url", default=DEFAULT_API_URL, help="API base URL")
    parser.add_argument("--count", type=int, default=10, help="Posts to create")
    parser.add_argument("--clean", action="store_true", help="Delete all posts first")
    parser.add_argument("--seed", type=int, default=None, help="Faker seed")
    args = parser.parse_args()

    setup_logging()

    if args.count < 1:
        logger.error("--count must be a positive integer")
        return 1

    faker = Faker()
    if args.seed is not None:
        faker.seed_instance(args.seed)

    with httpx.Client(base_url=args.api_url, timeout=TIMEOUT) as client:
        if not check_api(client):
            logger.error("API not reachable at %s", args.api_url)
            return 1

        try:
            if args.clean:
                logger.info("Deleted %d posts", delete_all_posts(client))
            ids = create_posts(client, args.count, faker)
        except httpx.HTTPError as e:
            logger.error("Seeding failed: %s", e)
            return 1

    logger.info("Created %d posts", len(ids))
    return 0


if __name__ == "__main__":
    sys.exit(main())
