"""Unit tests for InMemoryCommentRepository.

The in-memory store backs every unit and API test, so it must order and
filter exactly like the PostgreSQL repository.
"""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from chatter.domain.value import ReactionKind, SortMode, UserId
from chatter.persistence.repository.inmemory import InMemoryCommentRepository
from tests.conftest import make_comment

BASE = datetime(2024, 1, 1, 12, 0, 0)


@pytest.mark.asyncio
async def test_newest_first_with_offset():
    repo = InMemoryCommentRepository()
    comments = [
        await repo.save(make_comment(created_at=BASE + timedelta(minutes=i)))
        for i in range(4)
    ]

    listing = await repo.find_top_level("page-1", SortMode.NEWEST, limit=2, offset=1)

    assert [c.id for c in listing] == [comments[2].id, comments[1].id]


@pytest.mark.asyncio
async def test_most_disliked_breaks_ties_by_recency():
    repo = InMemoryCommentRepository()
    older = await repo.save(make_comment(created_at=BASE))
    newer = await repo.save(make_comment(created_at=BASE + timedelta(minutes=1)))
    disliked = await repo.save(make_comment(created_at=BASE - timedelta(minutes=1)))
    await repo.toggle_reaction(disliked.id, UserId(uuid4()), ReactionKind.DISLIKE)

    listing = await repo.find_top_level(
        "page-1", SortMode.MOST_DISLIKED, limit=10, offset=0
    )

    assert [c.id for c in listing] == [disliked.id, newer.id, older.id]


@pytest.mark.asyncio
async def test_deleted_children_only_with_flag():
    repo = InMemoryCommentRepository()
    parent = await repo.save(make_comment())
    kept = await repo.save(make_comment(parent_id=parent.id, created_at=BASE))
    removed = await repo.save(
        make_comment(parent_id=parent.id, created_at=BASE + timedelta(seconds=1))
    )
    await repo.mark_deleted(removed.id)

    visible = await repo.find_children(parent.id)
    everything = await repo.find_children(parent.id, include_deleted=True)

    assert [c.id for c in visible] == [kept.id]
    assert [c.id for c in everything] == [kept.id, removed.id]


@pytest.mark.asyncio
async def test_add_reply_is_idempotent():
    repo = InMemoryCommentRepository()
    parent = await repo.save(make_comment())
    reply_id = uuid4()

    await repo.add_reply(parent.id, reply_id)
    await repo.add_reply(parent.id, reply_id)

    assert (await repo.find_by_id(parent.id)).reply_ids == [reply_id]
