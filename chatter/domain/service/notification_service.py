"""Notification fanout domain service."""

from abc import ABC, abstractmethod
from typing import Any

import logfire

from chatter.domain.model.comment import Comment
from chatter.domain.value import CommentEvent, CommentId, PageId, ReactionKind

from .base import Service


class BroadcastChannel(ABC):
    """Page-scoped broadcast capability.

    Implementations deliver ``event`` with ``payload`` to every viewer
    currently subscribed to ``page_id``. Delivery is best-effort.
    """

    @abstractmethod
    async def publish(
        self, page_id: PageId, event: CommentEvent, payload: dict[str, Any]
    ) -> None:
        pass


def comment_payload(comment: Comment) -> dict[str, Any]:
    """Serialize a comment for broadcast and API responses."""
    return {
        "id": str(comment.id),
        "page_id": comment.page_id,
        "author": {
            "id": str(comment.author_id),
            "username": comment.author_username.root,
        },
        "content": comment.content,
        "parent_id": str(comment.parent_id) if comment.parent_id else None,
        "likes": sorted(str(user_id) for user_id in comment.likes),
        "dislikes": sorted(str(user_id) for user_id in comment.dislikes),
        "reply_ids": [str(reply_id) for reply_id in comment.reply_ids],
        "likes_count": comment.likes_count,
        "dislikes_count": comment.dislikes_count,
        "replies_count": comment.replies_count,
        "is_deleted": comment.is_deleted,
        "created_at": comment.created_at.isoformat(),
        "updated_at": comment.updated_at.isoformat(),
    }


class NotificationService(Service):
    """Publishes comment mutations to the page's broadcast channel.

    Fire-and-forget: a failing channel is logged and never propagates to the
    caller, so a mutation response is never affected by fanout.
    """

    def __init__(self, broadcast_channel: BroadcastChannel) -> None:
        """Initialize notification service.

        Args:
            broadcast_channel: Page-scoped broadcast channel
        """
        self.broadcast_channel = broadcast_channel

    async def _publish(
        self, page_id: PageId, event: CommentEvent, payload: dict[str, Any]
    ) -> None:
        try:
            await self.broadcast_channel.publish(page_id, event, payload)
            logfire.debug("Event published", page_id=page_id, event=event.value)
        except Exception as e:
            logfire.warn(
                "Event publish failed",
                page_id=page_id,
                event=event.value,
                error=str(e),
                error_type=type(e).__name__,
            )

    async def comment_created(self, comment: Comment) -> None:
        await self._publish(
            comment.page_id, CommentEvent.NEW_COMMENT, comment_payload(comment)
        )

    async def comment_updated(self, comment: Comment) -> None:
        await self._publish(
            comment.page_id, CommentEvent.UPDATE_COMMENT, comment_payload(comment)
        )

    async def comment_deleted(self, page_id: PageId, comment_id: CommentId) -> None:
        await self._publish(
            page_id, CommentEvent.DELETE_COMMENT, {"commentId": str(comment_id)}
        )

    async def comment_reacted(self, comment: Comment, kind: ReactionKind) -> None:
        """Publish a like or dislike toggle (added or removed)."""
        event = (
            CommentEvent.LIKE_COMMENT
            if kind is ReactionKind.LIKE
            else CommentEvent.DISLIKE_COMMENT
        )
        await self._publish(comment.page_id, event, comment_payload(comment))
