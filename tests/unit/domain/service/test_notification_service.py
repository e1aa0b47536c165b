"""Unit tests for NotificationService."""

from typing import Any
from uuid import uuid4

import pytest

from chatter.adapter.websocket import RecordingBroadcastChannel
from chatter.domain.service import BroadcastChannel, NotificationService
from chatter.domain.value import CommentEvent, CommentId, PageId, ReactionKind, UserId
from tests.conftest import make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class FailingBroadcastChannel(BroadcastChannel):
    """Channel that always fails to publish."""

    async def publish(
        self, page_id: PageId, event: CommentEvent, payload: dict[str, Any]
    ) -> None:
        raise ConnectionError("broadcast backend is down")


class TestNotificationService:
    """Tests for event fanout."""

    @pytest.mark.asyncio
    async def test_comment_created_publishes_new_comment(self, unit_env):
        """Created comments are published with their full payload."""
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        channel = await unit_env.get(RecordingBroadcastChannel)
        comment = make_comment(page_id="page-9", author_username="alice")

        # Act
        await notification_service.comment_created(comment)

        # Assert
        page_id, event, payload = channel.events[0]
        assert page_id == "page-9"
        assert event == CommentEvent.NEW_COMMENT
        assert payload["id"] == str(comment.id)
        assert payload["author"] == {
            "id": str(comment.author_id),
            "username": "alice",
        }
        assert payload["likes_count"] == 0

    @pytest.mark.asyncio
    async def test_comment_deleted_publishes_only_the_id(self, unit_env):
        notification_service = await unit_env.get(NotificationService)
        channel = await unit_env.get(RecordingBroadcastChannel)
        comment_id = CommentId(uuid4())

        await notification_service.comment_deleted(PageId("page-1"), comment_id)

        assert channel.events == [
            ("page-1", CommentEvent.DELETE_COMMENT, {"commentId": str(comment_id)})
        ]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "kind,event",
        [
            (ReactionKind.LIKE, CommentEvent.LIKE_COMMENT),
            (ReactionKind.DISLIKE, CommentEvent.DISLIKE_COMMENT),
        ],
    )
    async def test_comment_reacted_event_per_kind(self, unit_env, kind, event):
        """Likes and dislikes publish distinct events."""
        notification_service = await unit_env.get(NotificationService)
        channel = await unit_env.get(RecordingBroadcastChannel)
        comment = make_comment(page_id="page-1")

        await notification_service.comment_reacted(comment, kind)

        assert channel.events_for(PageId("page-1")) == [event]

    @pytest.mark.asyncio
    async def test_failing_channel_never_raises(self):
        """A broken broadcast channel is logged and swallowed."""
        # Arrange
        notification_service = NotificationService(
            broadcast_channel=FailingBroadcastChannel()
        )
        comment = make_comment()

        # Act & Assert - no exception
        await notification_service.comment_created(comment)
        await notification_service.comment_updated(comment)
        await notification_service.comment_deleted(comment.page_id, comment.id)
        await notification_service.comment_reacted(comment, ReactionKind.LIKE)

    @pytest.mark.asyncio
    async def test_payload_lists_reactors_sorted(self, unit_env):
        """Reactor IDs are serialized in a stable order."""
        notification_service = await unit_env.get(NotificationService)
        channel = await unit_env.get(RecordingBroadcastChannel)
        likers = [UserId(uuid4()) for _ in range(3)]
        comment = make_comment(likes=frozenset(likers))

        await notification_service.comment_updated(comment)

        _, event, payload = channel.events[0]
        assert event == CommentEvent.UPDATE_COMMENT
        assert payload["likes"] == sorted(str(u) for u in likers)
        assert payload["likes_count"] == 3
