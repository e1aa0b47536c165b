"""Integration tests for PostgresCommentRepository.

Require a migrated PostgreSQL database (see DATABASE__URL). Each test uses
its own page so runs don't interfere.
"""

from uuid import uuid4

import pytest

from chatter.domain.repository import CommentRepository
from chatter.domain.value import ReactionKind, ReactionOutcome, SortMode, UserId
from tests.conftest import make_comment
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

integration_env = create_env_fixture(unmock={"persistence"})


def _page() -> str:
    return f"integration-{uuid4()}"


class TestCommentRepositoryIntegration:
    """Integration tests for comment persistence."""

    @pytest.mark.asyncio
    async def test_save_and_find_by_id(self, integration_env):
        # Arrange
        comment_repo = await integration_env.get(CommentRepository)
        comment = make_comment(page_id=_page(), content="Stored")

        # Act
        await comment_repo.save(comment)
        found = await comment_repo.find_by_id(comment.id)

        # Assert
        assert found is not None
        assert found.content == "Stored"
        assert found.author_username.root == "author"
        assert found.likes == set()
        assert found.reply_ids == []

    @pytest.mark.asyncio
    async def test_toggle_reaction_switches_and_removes(self, integration_env):
        """Toggle runs as a single UPDATE and keeps the sets disjoint."""
        # Arrange
        comment_repo = await integration_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment(page_id=_page()))
        user_id = UserId(uuid4())

        # Act
        _, liked = await comment_repo.toggle_reaction(
            comment.id, user_id, ReactionKind.LIKE
        )
        switched, disliked = await comment_repo.toggle_reaction(
            comment.id, user_id, ReactionKind.DISLIKE
        )
        removed, outcome = await comment_repo.toggle_reaction(
            comment.id, user_id, ReactionKind.DISLIKE
        )

        # Assert
        assert liked == ReactionOutcome.ADDED
        assert disliked == ReactionOutcome.ADDED
        assert switched.likes == set()
        assert switched.dislikes == {user_id}
        assert outcome == ReactionOutcome.REMOVED
        assert removed.dislikes_count == 0

    @pytest.mark.asyncio
    async def test_toggle_reaction_on_deleted_comment(self, integration_env):
        comment_repo = await integration_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment(page_id=_page()))
        await comment_repo.mark_deleted(comment.id)

        result = await comment_repo.toggle_reaction(
            comment.id, UserId(uuid4()), ReactionKind.LIKE
        )

        assert result is None

    @pytest.mark.asyncio
    async def test_add_reply_is_idempotent(self, integration_env):
        # Arrange
        comment_repo = await integration_env.get(CommentRepository)
        page_id = _page()
        parent = await comment_repo.save(make_comment(page_id=page_id))
        reply = await comment_repo.save(
            make_comment(page_id=page_id, parent_id=parent.id)
        )

        # Act
        await comment_repo.add_reply(parent.id, reply.id)
        await comment_repo.add_reply(parent.id, reply.id)

        # Assert
        found = await comment_repo.find_by_id(parent.id)
        assert found.reply_ids == [reply.id]
        children = await comment_repo.find_children(parent.id)
        assert [c.id for c in children] == [reply.id]

    @pytest.mark.asyncio
    async def test_find_top_level_sorted_and_counted(self, integration_env):
        """Replies and deleted comments are excluded from the listing."""
        # Arrange
        comment_repo = await integration_env.get(CommentRepository)
        page_id = _page()
        quiet = await comment_repo.save(make_comment(page_id=page_id))
        popular = await comment_repo.save(make_comment(page_id=page_id))
        gone = await comment_repo.save(make_comment(page_id=page_id))
        await comment_repo.save(make_comment(page_id=page_id, parent_id=quiet.id))
        await comment_repo.toggle_reaction(popular.id, UserId(uuid4()), ReactionKind.LIKE)
        await comment_repo.mark_deleted(gone.id)

        # Act
        listing = await comment_repo.find_top_level(
            page_id, SortMode.MOST_LIKED, limit=10, offset=0
        )
        total = await comment_repo.count_top_level(page_id)

        # Assert
        assert [c.id for c in listing] == [popular.id, quiet.id]
        assert total == 2

    @pytest.mark.asyncio
    async def test_update_content_skips_deleted(self, integration_env):
        comment_repo = await integration_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment(page_id=_page()))
        await comment_repo.mark_deleted(comment.id)

        updated = await comment_repo.update_content(comment.id, "Too late")

        assert updated is None
