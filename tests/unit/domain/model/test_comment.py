"""Unit tests for the Comment entity."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from chatter.domain.value import CommentId, ReactionKind, ReactionOutcome, UserId
from tests.conftest import make_comment


class TestReactionToggle:
    """Tests for Comment.with_reaction_toggled."""

    def test_like_adds_user_to_likes(self):
        """First like adds the user to likes."""
        # Arrange
        comment = make_comment()
        user_id = UserId(uuid4())

        # Act
        updated, outcome = comment.with_reaction_toggled(user_id, ReactionKind.LIKE)

        # Assert
        assert outcome == ReactionOutcome.ADDED
        assert user_id in updated.likes
        assert updated.likes_count == 1
        assert updated.dislikes_count == 0

    def test_like_twice_restores_prior_state(self):
        """Toggling the same reaction twice is an involution."""
        # Arrange
        other = UserId(uuid4())
        comment = make_comment(likes=frozenset({other}))
        user_id = UserId(uuid4())

        # Act
        once, first = comment.with_reaction_toggled(user_id, ReactionKind.LIKE)
        twice, second = once.with_reaction_toggled(user_id, ReactionKind.LIKE)

        # Assert
        assert first == ReactionOutcome.ADDED
        assert second == ReactionOutcome.REMOVED
        assert twice.likes == comment.likes
        assert twice.dislikes == comment.dislikes

    def test_dislike_switches_existing_like(self):
        """Disliking a liked comment moves the user to dislikes."""
        # Arrange
        user_id = UserId(uuid4())
        comment = make_comment(likes=frozenset({user_id}))

        # Act
        updated, outcome = comment.with_reaction_toggled(user_id, ReactionKind.DISLIKE)

        # Assert
        assert outcome == ReactionOutcome.ADDED
        assert user_id in updated.dislikes
        assert user_id not in updated.likes

    def test_removing_dislike_leaves_likes_untouched(self):
        """Removing a reaction never touches the opposite set."""
        # Arrange
        user_id = UserId(uuid4())
        liker = UserId(uuid4())
        comment = make_comment(
            likes=frozenset({liker}), dislikes=frozenset({user_id})
        )

        # Act
        updated, outcome = comment.with_reaction_toggled(user_id, ReactionKind.DISLIKE)

        # Assert
        assert outcome == ReactionOutcome.REMOVED
        assert updated.dislikes == frozenset()
        assert updated.likes == frozenset({liker})

    def test_toggle_does_not_mutate_original(self):
        """Comments are immutable; toggling returns a new instance."""
        # Arrange
        comment = make_comment()

        # Act
        comment.with_reaction_toggled(UserId(uuid4()), ReactionKind.LIKE)

        # Assert
        assert comment.likes_count == 0


class TestCommentInvariants:
    """Tests for Comment validation."""

    def test_overlapping_reaction_sets_rejected(self):
        """A user in both likes and dislikes is invalid."""
        user_id = UserId(uuid4())

        with pytest.raises(ValidationError, match="both like and dislike"):
            make_comment(likes=frozenset({user_id}), dislikes=frozenset({user_id}))

    def test_empty_content_rejected(self):
        """Content must not be empty."""
        with pytest.raises(ValidationError):
            make_comment(content="")

    def test_with_reply_is_idempotent(self):
        """Adding the same reply twice leaves a single back-link entry."""
        # Arrange
        comment = make_comment()
        reply_id = CommentId(uuid4())

        # Act
        updated = comment.with_reply(reply_id).with_reply(reply_id)

        # Assert
        assert updated.reply_ids == [reply_id]
        assert updated.replies_count == 1

    def test_is_reply(self):
        """Only comments with a parent are replies."""
        assert not make_comment().is_reply
        assert make_comment(parent_id=CommentId(uuid4())).is_reply
