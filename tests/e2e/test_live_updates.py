"""End-to-end tests for live page updates over WebSocket."""

import pytest
from starlette.websockets import WebSocketDisconnect

from tests.conftest import bearer
from tests.harness import create_client_fixture

client = create_client_fixture(unmock={"broadcast"})

PAGE = "page-123"


def register(client, username: str = "alice") -> str:
    response = client.post(
        "/api/auth/register",
        json={
            "username": username,
            "email": f"{username}@example.com",
            "password": "secret1",
        },
    )
    return response.json()["token"]


def test_rejects_missing_token(client):
    with pytest.raises(WebSocketDisconnect):
        with client.websocket_connect("/ws") as websocket:
            websocket.receive_json()


def test_rejects_invalid_token(client):
    with pytest.raises(WebSocketDisconnect):
        with client.websocket_connect("/ws?token=not.a.jwt") as websocket:
            websocket.receive_json()


def test_unknown_message(client):
    token = register(client)

    with client.websocket_connect(f"/ws?token={token}") as websocket:
        websocket.send_json({"type": "shout", "page_id": PAGE})

        assert websocket.receive_json()["event"] == "error"


def test_viewer_receives_page_events(client):
    """A viewer joined to a page sees comments created there."""
    # Arrange
    token = register(client)

    with client.websocket_connect(f"/ws?token={token}") as websocket:
        websocket.send_json({"type": "joinPage", "page_id": PAGE})
        assert websocket.receive_json() == {"event": "joinedPage", "page_id": PAGE}

        # Act
        response = client.post(
            "/api/comments",
            json={"content": "Live!", "page_id": PAGE},
            headers=bearer(token),
        )
        comment_id = response.json()["comment"]["id"]
        client.delete(f"/api/comments/{comment_id}", headers=bearer(token))

        # Assert
        created = websocket.receive_json()
        assert created["event"] == "newComment"
        assert created["page_id"] == PAGE
        assert created["data"]["content"] == "Live!"
        deleted = websocket.receive_json()
        assert deleted["event"] == "deleteComment"
        assert deleted["data"] == {"commentId": comment_id}


def test_leave_page_ack(client):
    token = register(client)

    with client.websocket_connect(f"/ws?token={token}") as websocket:
        websocket.send_json({"type": "joinPage", "page_id": PAGE})
        websocket.receive_json()
        websocket.send_json({"type": "leavePage", "page_id": PAGE})

        assert websocket.receive_json() == {"event": "leftPage", "page_id": PAGE}
