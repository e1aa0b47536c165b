"""Unit tests for ReactionService."""

import asyncio
import random
from uuid import uuid4

import pytest

from chatter.domain.error import NotFoundError
from chatter.domain.repository import CommentRepository
from chatter.domain.service import ReactionService
from chatter.domain.value import CommentId, ReactionKind, ReactionOutcome, UserId
from tests.conftest import make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestReact:
    """Tests for react method."""

    @pytest.mark.asyncio
    async def test_like_then_like_again_removes(self, unit_env):
        """Second like by the same user removes the like."""
        # Arrange
        reaction_service = await unit_env.get(ReactionService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment())
        user_id = UserId(uuid4())

        # Act
        first = await reaction_service.react(comment.id, user_id, ReactionKind.LIKE)
        second = await reaction_service.react(comment.id, user_id, ReactionKind.LIKE)

        # Assert
        assert first.outcome == ReactionOutcome.ADDED
        assert first.message == "Comment liked"
        assert first.comment.likes_count == 1
        assert second.outcome == ReactionOutcome.REMOVED
        assert second.message == "Like removed"
        assert second.comment.likes_count == 0

    @pytest.mark.asyncio
    async def test_dislike_after_like_switches(self, unit_env):
        """A liker who dislikes ends up only in dislikes."""
        # Arrange
        reaction_service = await unit_env.get(ReactionService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment())
        user_id = UserId(uuid4())
        await reaction_service.react(comment.id, user_id, ReactionKind.LIKE)

        # Act
        result = await reaction_service.react(comment.id, user_id, ReactionKind.DISLIKE)

        # Assert
        assert result.outcome == ReactionOutcome.ADDED
        assert result.message == "Comment disliked"
        assert user_id in result.comment.dislikes
        assert user_id not in result.comment.likes

        stored = await comment_repo.find_by_id(comment.id)
        assert stored.likes == frozenset()
        assert stored.dislikes == frozenset({user_id})

    @pytest.mark.asyncio
    async def test_dislike_twice_message(self, unit_env):
        reaction_service = await unit_env.get(ReactionService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment())
        user_id = UserId(uuid4())

        await reaction_service.react(comment.id, user_id, ReactionKind.DISLIKE)
        result = await reaction_service.react(comment.id, user_id, ReactionKind.DISLIKE)

        assert result.outcome == ReactionOutcome.REMOVED
        assert result.message == "Dislike removed"

    @pytest.mark.asyncio
    async def test_react_on_missing_comment_raises_not_found(self, unit_env):
        reaction_service = await unit_env.get(ReactionService)

        with pytest.raises(NotFoundError):
            await reaction_service.react(
                CommentId(uuid4()), UserId(uuid4()), ReactionKind.LIKE
            )

    @pytest.mark.asyncio
    async def test_react_on_deleted_comment_raises_not_found(self, unit_env):
        """Deleted comments accept no new reactions."""
        reaction_service = await unit_env.get(ReactionService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment(is_deleted=True))

        with pytest.raises(NotFoundError):
            await reaction_service.react(comment.id, UserId(uuid4()), ReactionKind.LIKE)

    @pytest.mark.asyncio
    async def test_reactions_of_other_users_are_preserved(self, unit_env):
        """Toggling one user's reaction never touches another user's."""
        # Arrange
        reaction_service = await unit_env.get(ReactionService)
        comment_repo = await unit_env.get(CommentRepository)
        other = UserId(uuid4())
        comment = await comment_repo.save(make_comment(dislikes=frozenset({other})))

        # Act
        result = await reaction_service.react(
            comment.id, UserId(uuid4()), ReactionKind.LIKE
        )

        # Assert
        assert result.comment.dislikes == frozenset({other})
        assert result.comment.likes_count == 1


class TestConcurrentReactions:
    """Reaction sets stay disjoint under interleaved requests."""

    @pytest.mark.asyncio
    async def test_interleaved_toggles_keep_sets_disjoint(self, unit_env):
        """Random concurrent likes and dislikes never overlap."""
        # Arrange
        reaction_service = await unit_env.get(ReactionService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment())
        users = [UserId(uuid4()) for _ in range(5)]
        rng = random.Random(42)
        calls = [
            (rng.choice(users), rng.choice(list(ReactionKind))) for _ in range(200)
        ]

        # Act
        await asyncio.gather(
            *(
                reaction_service.react(comment.id, user_id, kind)
                for user_id, kind in calls
            )
        )

        # Assert
        stored = await comment_repo.find_by_id(comment.id)
        assert stored.likes.isdisjoint(stored.dislikes)

    @pytest.mark.asyncio
    async def test_concurrent_double_like_returns_to_start(self, unit_env):
        """Two concurrent identical toggles cancel out."""
        # Arrange
        reaction_service = await unit_env.get(ReactionService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment())
        user_id = UserId(uuid4())

        # Act
        results = await asyncio.gather(
            reaction_service.react(comment.id, user_id, ReactionKind.LIKE),
            reaction_service.react(comment.id, user_id, ReactionKind.LIKE),
        )

        # Assert
        assert {r.outcome for r in results} == {
            ReactionOutcome.ADDED,
            ReactionOutcome.REMOVED,
        }
        stored = await comment_repo.find_by_id(comment.id)
        assert stored.likes == frozenset()
