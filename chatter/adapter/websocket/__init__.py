"""WebSocket broadcast adapter."""

from .rooms import PageRoomManager, RecordingBroadcastChannel, room_name

__all__ = [
    "PageRoomManager",
    "RecordingBroadcastChannel",
    "room_name",
]
