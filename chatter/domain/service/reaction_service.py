"""Reaction (like/dislike) domain service."""

import logfire
from pydantic import BaseModel

from chatter.domain.error import NotFoundError
from chatter.domain.model.comment import Comment
from chatter.domain.repository import CommentRepository
from chatter.domain.value import CommentId, ReactionKind, ReactionOutcome, UserId

from .base import Service


class ReactionResult(BaseModel):
    """Outcome of a reaction toggle."""

    comment: Comment
    kind: ReactionKind
    outcome: ReactionOutcome

    @property
    def message(self) -> str:
        """Human readable summary of what happened."""
        if self.kind is ReactionKind.LIKE:
            return (
                "Comment liked"
                if self.outcome is ReactionOutcome.ADDED
                else "Like removed"
            )
        return (
            "Comment disliked"
            if self.outcome is ReactionOutcome.ADDED
            else "Dislike removed"
        )


class ReactionService(Service):
    """Domain service for toggling likes and dislikes.

    The toggle is delegated to a single atomic repository update, so set
    membership is always decided from the stored row and never from a copy
    read earlier in the request.
    """

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize reaction service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def react(
        self, comment_id: CommentId, user_id: UserId, kind: ReactionKind
    ) -> ReactionResult:
        """Toggle a user's reaction on a comment.

        Args:
            comment_id: Comment ID
            user_id: Reacting user ID
            kind: LIKE or DISLIKE

        Returns:
            Updated comment and whether the reaction was added or removed

        Raises:
            NotFoundError: If the comment doesn't exist or is deleted
        """
        with logfire.span(
            "reaction_service.react",
            comment_id=str(comment_id),
            user_id=str(user_id),
            kind=kind.value,
        ):
            toggled = await self.comment_repository.toggle_reaction(
                comment_id, user_id, kind
            )
            if toggled is None:
                logfire.warn(
                    "Reaction on missing comment",
                    comment_id=str(comment_id),
                    user_id=str(user_id),
                )
                raise NotFoundError("Comment", str(comment_id))

            comment, outcome = toggled
            logfire.info(
                "Reaction toggled",
                comment_id=str(comment_id),
                user_id=str(user_id),
                kind=kind.value,
                outcome=outcome.value,
                likes_count=comment.likes_count,
                dislikes_count=comment.dislikes_count,
            )
            return ReactionResult(comment=comment, kind=kind, outcome=outcome)
