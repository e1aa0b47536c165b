"""WebSocket route for live page updates.

Connect with ``ws://host/ws?token=<jwt>`` and send::

    {"type": "joinPage", "page_id": "<page>"}
    {"type": "leavePage", "page_id": "<page>"}

Comment events for joined pages arrive as
``{"event": <eventKind>, "page_id": <page>, "data": <payload>}``.
"""

import logfire
from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Query, WebSocket, WebSocketDisconnect, status

from chatter.adapter.websocket import PageRoomManager
from chatter.domain.error import AuthenticationError
from chatter.domain.service import JWTService
from chatter.domain.value import page_id_of

router = APIRouter(tags=["websocket"])


async def _authenticate(websocket: WebSocket, token: str | None) -> str | None:
    """Verify the connection token and return the username, or None."""
    if not token:
        return None
    async with websocket.state.dishka_container() as request_container:
        jwt_service = await request_container.get(JWTService)
        try:
            return jwt_service.verify_token(token).username
        except AuthenticationError:
            return None


@router.websocket("/ws")
@inject
async def page_updates(
    websocket: WebSocket,
    manager: FromDishka[PageRoomManager],
    token: str | None = Query(default=None),
) -> None:
    """Subscribe to comment events of one or more pages."""
    username = await _authenticate(websocket, token)
    if username is None:
        logfire.info("WebSocket rejected - invalid token")
        await websocket.close(
            code=status.WS_1008_POLICY_VIOLATION, reason="Authentication error"
        )
        return

    await manager.connect(websocket)
    try:
        while True:
            try:
                message = await websocket.receive_json()
            except ValueError:
                await websocket.send_json(
                    {"event": "error", "data": {"message": "Invalid JSON message"}}
                )
                continue

            message_type = message.get("type") if isinstance(message, dict) else None
            page_id = message.get("page_id") if isinstance(message, dict) else None
            if message_type not in ("joinPage", "leavePage") or not isinstance(
                page_id, str
            ):
                await websocket.send_json(
                    {"event": "error", "data": {"message": "Unknown message"}}
                )
                continue

            if message_type == "joinPage":
                manager.join(page_id_of(page_id), websocket)
                logfire.info("Viewer joined page", username=username, page_id=page_id)
                await websocket.send_json({"event": "joinedPage", "page_id": page_id})
            else:
                manager.leave(page_id_of(page_id), websocket)
                logfire.info("Viewer left page", username=username, page_id=page_id)
                await websocket.send_json({"event": "leftPage", "page_id": page_id})
    except WebSocketDisconnect:
        pass
    finally:
        manager.disconnect(websocket)
