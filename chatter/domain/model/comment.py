"""Comment entity.

Comments belong to a page and form a two-level-or-deeper thread through
``parent_id``. Each comment carries the set of users who liked it and the
set of users who disliked it; a user is never in both.
"""

from typing import Optional

from pydantic import Field, model_validator

from chatter.domain.model.common import DomainModel
from chatter.domain.value import CommentId, PageId, ReactionKind, ReactionOutcome, UserId
from chatter.domain.value.types import Username

MAX_PAGE_ID_LENGTH = 200


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level), authoritative
    - reply_ids: Back-link to direct children in insertion order. This is a
      cache that can be rebuilt from a scan of ``parent_id``.

    Soft-deleted comments keep their record, reactions and back-links so that
    existing replies still point at a valid parent.
    """

    id: CommentId
    page_id: PageId = Field(min_length=1, max_length=MAX_PAGE_ID_LENGTH)
    author_id: UserId
    author_username: Username
    # Upper bound is CommentSettings.max_content_length, enforced on write
    content: str = Field(min_length=1)
    parent_id: Optional[CommentId] = None
    likes: frozenset[UserId] = Field(default_factory=frozenset)
    dislikes: frozenset[UserId] = Field(default_factory=frozenset)
    reply_ids: list[CommentId] = Field(default_factory=list)
    is_deleted: bool = False

    @model_validator(mode="after")
    def check_reactions_disjoint(self) -> "Comment":
        """A user cannot both like and dislike the same comment."""
        if self.likes & self.dislikes:
            raise ValueError("A user cannot both like and dislike a comment")
        return self

    @property
    def is_reply(self) -> bool:
        return self.parent_id is not None

    @property
    def likes_count(self) -> int:
        return len(self.likes)

    @property
    def dislikes_count(self) -> int:
        return len(self.dislikes)

    @property
    def replies_count(self) -> int:
        return len(self.reply_ids)

    def reactors(self, kind: ReactionKind) -> frozenset[UserId]:
        """Users holding the given reaction."""
        return self.likes if kind is ReactionKind.LIKE else self.dislikes

    def with_reaction_toggled(
        self, user_id: UserId, kind: ReactionKind
    ) -> tuple["Comment", ReactionOutcome]:
        """Toggle ``kind`` for ``user_id`` and return the new state.

        If the user already holds ``kind`` it is removed and the opposite set
        is left untouched. Otherwise it is added and the user is removed from
        the opposite set. Membership is read from this instance, so callers
        must pass the freshest state they have.

        Args:
            user_id: Reacting user
            kind: Reaction to toggle

        Returns:
            Tuple of (updated comment, outcome)
        """
        target = self.reactors(kind)
        opposite = self.reactors(kind.opposite)

        if user_id in target:
            target = target - {user_id}
            outcome = ReactionOutcome.REMOVED
        else:
            target = target | {user_id}
            opposite = opposite - {user_id}
            outcome = ReactionOutcome.ADDED

        if kind is ReactionKind.LIKE:
            update = {"likes": target, "dislikes": opposite}
        else:
            update = {"likes": opposite, "dislikes": target}

        return self.model_copy(update=update), outcome

    def with_reply(self, reply_id: CommentId) -> "Comment":
        """Return a copy with ``reply_id`` in the back-link (set semantics)."""
        if reply_id in self.reply_ids:
            return self
        return self.model_copy(update={"reply_ids": [*self.reply_ids, reply_id]})
