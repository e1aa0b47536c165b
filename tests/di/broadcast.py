"""Recording broadcast for tests."""

from dishka import Scope, alias, provide

from chatter.adapter.websocket import PageRoomManager, RecordingBroadcastChannel
from chatter.domain.service import BroadcastChannel
from chatter.util.di.infrastructure.broadcast import BroadcastProvider


class MockBroadcastProvider(BroadcastProvider):
    """Events are recorded for assertions instead of being sent.

    The page rooms still exist so the WebSocket route can be exercised; they
    just never receive events.
    """

    __is_mock__ = True

    scope = Scope.APP

    rooms = provide(PageRoomManager)
    recorder = provide(RecordingBroadcastChannel)
    channel = alias(source=RecordingBroadcastChannel, provides=BroadcastChannel)
