"""WebSocket page rooms.

Viewers join ``page:<page_id>`` rooms over a WebSocket connection and
receive every comment event published for that page.
"""

import asyncio
from typing import Any

import logfire
from fastapi import WebSocket

from chatter.domain.service.notification_service import BroadcastChannel
from chatter.domain.value import CommentEvent, PageId


def room_name(page_id: PageId) -> str:
    """Name of the broadcast room of a page."""
    return f"page:{page_id}"


class PageRoomManager(BroadcastChannel):
    """In-process registry of page rooms and their WebSocket connections.

    A connection may sit in several rooms at once. Publishing only schedules
    delivery: sends run in a background task, and a connection whose send
    fails is dropped from every room.
    """

    def __init__(self) -> None:
        # room name -> connections
        self._rooms: dict[str, set[WebSocket]] = {}
        # connection -> room names
        self._memberships: dict[WebSocket, set[str]] = {}
        self._pending: set[asyncio.Task] = set()

    async def connect(self, websocket: WebSocket) -> None:
        """Accept and register a WebSocket connection."""
        await websocket.accept()
        self._memberships.setdefault(websocket, set())
        logfire.info("WebSocket connected", connections=self.connection_count)

    def disconnect(self, websocket: WebSocket) -> None:
        """Remove a connection from all of its rooms."""
        for room in self._memberships.pop(websocket, set()):
            members = self._rooms.get(room)
            if members is None:
                continue
            members.discard(websocket)
            if not members:
                del self._rooms[room]
        logfire.info("WebSocket disconnected", connections=self.connection_count)

    def join(self, page_id: PageId, websocket: WebSocket) -> None:
        """Subscribe a connection to a page room."""
        room = room_name(page_id)
        self._rooms.setdefault(room, set()).add(websocket)
        self._memberships.setdefault(websocket, set()).add(room)
        logfire.debug("Joined page room", room=room, members=len(self._rooms[room]))

    def leave(self, page_id: PageId, websocket: WebSocket) -> None:
        """Unsubscribe a connection from a page room."""
        room = room_name(page_id)
        members = self._rooms.get(room)
        if members is not None:
            members.discard(websocket)
            if not members:
                del self._rooms[room]
        if websocket in self._memberships:
            self._memberships[websocket].discard(room)
        logfire.debug("Left page room", room=room)

    @property
    def connection_count(self) -> int:
        return len(self._memberships)

    def members(self, page_id: PageId) -> set[WebSocket]:
        """Connections currently in a page room."""
        return set(self._rooms.get(room_name(page_id), set()))

    async def publish(
        self, page_id: PageId, event: CommentEvent, payload: dict[str, Any]
    ) -> None:
        """Schedule delivery of an event to every member of the page room."""
        recipients = self.members(page_id)
        if not recipients:
            return

        message = {"event": event.value, "page_id": page_id, "data": payload}
        task = asyncio.create_task(self._deliver(recipients, message))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _deliver(
        self, recipients: set[WebSocket], message: dict[str, Any]
    ) -> None:
        disconnected = []
        for websocket in recipients:
            try:
                await websocket.send_json(message)
            except Exception as e:
                logfire.warn(
                    "WebSocket send failed",
                    event=message["event"],
                    page_id=message["page_id"],
                    error=str(e),
                )
                disconnected.append(websocket)

        # Clean up disconnected connections
        for websocket in disconnected:
            self.disconnect(websocket)

    async def drain(self) -> None:
        """Wait for all scheduled deliveries to finish."""
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)


class RecordingBroadcastChannel(BroadcastChannel):
    """Broadcast channel that records published events instead of sending."""

    def __init__(self) -> None:
        self.events: list[tuple[PageId, CommentEvent, dict[str, Any]]] = []

    async def publish(
        self, page_id: PageId, event: CommentEvent, payload: dict[str, Any]
    ) -> None:
        self.events.append((page_id, event, payload))

    def events_for(self, page_id: PageId) -> list[CommentEvent]:
        """Event kinds published to a page, in order."""
        return [event for target, event, _ in self.events if target == page_id]

    def clear(self) -> None:
        self.events.clear()
