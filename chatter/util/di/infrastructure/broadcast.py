"""Broadcast infrastructure providers."""

from dishka import Scope, alias, provide

from chatter.adapter.websocket import PageRoomManager
from chatter.domain.service import BroadcastChannel
from chatter.util.di.base import ProviderBase


class BroadcastProvider(ProviderBase):
    """Broadcast component base."""

    __mock_component__ = "broadcast"


class ProdBroadcastProvider(BroadcastProvider):
    """Comment events go to the process-wide WebSocket page rooms."""

    __is_mock__ = False

    scope = Scope.APP

    rooms = provide(PageRoomManager)
    channel = alias(source=PageRoomManager, provides=BroadcastChannel)
