"""
Post Store Contract Tests

Runs the same behavioural checks against every store backend
(in-memory and SQLite-backed SQL).
"""

from __future__ import annotations

import asyncio

import pytest

from blog_api.core.exceptions import NotFoundError, ValidationError
from blog_api.schemas.posts import Author, PostDraft, PostPatch

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _draft(title: str = "Hello", first: str = "Ada", last: str = "Lovelace") -> PostDraft:
    return PostDraft(
        title=title,
        author=Author(first_name=first, last_name=last),
        content=f"Body of {title}",
    )


# ---------------------------------------------------------------------------
# Insert / find
# ---------------------------------------------------------------------------


class TestInsert:
    async def test_insert_then_find_returns_draft_plus_assigned_fields(self, any_store):
        draft = _draft()
        [post] = await any_store.insert_many([draft])

        found = await any_store.find_by_id(post.id)

        assert found == post
        assert found.title == draft.title
        assert found.author == draft.author
        assert found.content == draft.content
        assert found.id
        assert found.created.tzinfo is not None

    async def test_insert_many_preserves_order_and_unique_ids(self, any_store):
        drafts = [_draft(title=f"Post {i}") for i in range(5)]

        posts = await any_store.insert_many(drafts)

        assert [p.title for p in posts] == [d.title for d in drafts]
        assert len({p.id for p in posts}) == 5

    async def test_created_is_non_decreasing(self, any_store):
        first = await any_store.insert_many([_draft(title=f"A{i}") for i in range(3)])
        second = await any_store.insert_many([_draft(title=f"B{i}") for i in range(3)])

        stamps = [p.created for p in first + second]
        assert stamps == sorted(stamps)

    async def test_insert_accepts_wire_shaped_mapping(self, any_store):
        post = await any_store.insert_one(
            {"title": "T", "author": {"firstName": "A", "lastName": "B"}, "content": "C"}
        )

        assert post.author.first_name == "A"
        assert post.author.full_name == "A B"

    @pytest.mark.parametrize(
        "payload",
        [
            {"author": {"firstName": "A", "lastName": "B"}, "content": "C"},
            {"title": "T", "content": "C"},
            {"title": "T", "author": {"firstName": "A"}, "content": "C"},
            {"title": "T", "author": {"firstName": "A", "lastName": "B"}},
            {"title": "", "author": {"firstName": "A", "lastName": "B"}, "content": "C"},
        ],
    )
    async def test_invalid_draft_rejected_and_nothing_inserted(self, any_store, payload):
        valid = {"title": "ok", "author": {"firstName": "X", "lastName": "Y"}, "content": "ok"}

        with pytest.raises(ValidationError):
            await any_store.insert_many([valid, payload])

        assert await any_store.count() == 0

    async def test_find_by_unknown_id_is_none(self, any_store):
        await any_store.insert_one(_draft())

        assert await any_store.find_by_id("does-not-exist") is None

    async def test_find_all_returns_everything(self, any_store):
        posts = await any_store.insert_many([_draft(title=f"P{i}") for i in range(4)])

        found = await any_store.find_all()

        assert {p.id for p in found} == {p.id for p in posts}


# ---------------------------------------------------------------------------
# Update
# ---------------------------------------------------------------------------


class TestUpdate:
    async def test_partial_update_changes_only_given_field(self, any_store):
        post = await any_store.insert_one(_draft())

        updated = await any_store.update_by_id(post.id, {"content": "X"})

        assert updated.content == "X"
        assert updated.title == post.title
        assert updated.author == post.author
        assert updated.created == post.created
        assert await any_store.find_by_id(post.id) == updated

    async def test_author_subfields_are_merged(self, any_store):
        post = await any_store.insert_one(_draft(first="Ada", last="Lovelace"))

        updated = await any_store.update_by_id(post.id, {"author": {"firstName": "Augusta"}})

        assert updated.author.first_name == "Augusta"
        assert updated.author.last_name == "Lovelace"
        stored = await any_store.find_by_id(post.id)
        assert stored.author.full_name == "Augusta Lovelace"

    async def test_id_and_created_are_immutable(self, any_store):
        post = await any_store.insert_one(_draft())

        updated = await any_store.update_by_id(
            post.id, {"id": "other", "created": "2000-01-01T00:00:00Z", "title": "New"}
        )

        assert updated.id == post.id
        assert updated.created == post.created
        assert updated.title == "New"
        assert await any_store.find_by_id("other") is None

    async def test_accepts_patch_model(self, any_store):
        post = await any_store.insert_one(_draft())

        updated = await any_store.update_by_id(post.id, PostPatch(title="Patched"))

        assert updated.title == "Patched"

    async def test_unknown_id_raises_not_found(self, any_store):
        await any_store.insert_one(_draft())

        with pytest.raises(NotFoundError) as exc_info:
            await any_store.update_by_id("missing", {"content": "X"})

        assert exc_info.value.post_id == "missing"
        assert await any_store.count() == 1

    async def test_empty_field_rejected(self, any_store):
        post = await any_store.insert_one(_draft())

        with pytest.raises(ValidationError):
            await any_store.update_by_id(post.id, {"title": ""})

        assert (await any_store.find_by_id(post.id)).title == post.title


# ---------------------------------------------------------------------------
# Delete / clear
# ---------------------------------------------------------------------------


class TestDelete:
    async def test_delete_is_idempotent(self, any_store):
        post = await any_store.insert_one(_draft())
        other = await any_store.insert_one(_draft(title="Keep"))

        assert await any_store.delete_by_id(post.id) is True
        assert await any_store.delete_by_id(post.id) is False

        remaining = await any_store.find_all()
        assert [p.id for p in remaining] == [other.id]

    async def test_delete_unknown_id_returns_false(self, any_store):
        assert await any_store.delete_by_id("never-existed") is False

    async def test_clear_empties_store(self, any_store):
        await any_store.insert_many([_draft(title=f"P{i}") for i in range(3)])

        await any_store.clear()

        assert await any_store.count() == 0
        assert await any_store.find_all() == []


# ---------------------------------------------------------------------------
# Concurrency
# ---------------------------------------------------------------------------


async def test_concurrent_mutations_do_not_interleave(any_store):
    post = await any_store.insert_one(_draft())

    await asyncio.gather(
        *(any_store.update_by_id(post.id, {"content": f"v{i}"}) for i in range(10)),
        *(any_store.insert_one(_draft(title=f"C{i}")) for i in range(10)),
    )

    stored = await any_store.find_by_id(post.id)
    assert stored.content.startswith("v")
    assert stored.title == post.title
    assert await any_store.count() == 11


async def test_sql_store_persists_across_instances(sql_store, tmp_path):
    from blog_api.repositories import SqlPostStore

    post = await sql_store.insert_one(_draft())

    reopened = SqlPostStore.from_url(f"sqlite+aiosqlite:///{tmp_path / 'posts.db'}")
    try:
        assert await reopened.find_by_id(post.id) == post
        [later] = await reopened.insert_many([_draft(title="Later")])
        assert later.created >= post.created
    finally:
        await reopened.dispose()
