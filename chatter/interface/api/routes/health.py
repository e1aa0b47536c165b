"""Liveness probe."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from chatter.adapter.websocket import PageRoomManager
from chatter.config import Settings
from chatter.util.observability import SERVICE_VERSION

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    environment: str
    live_connections: int


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: FromDishka[Settings],
    rooms: FromDishka[PageRoomManager],
) -> HealthResponse:
    """Report that the process is serving, with its open WebSocket count."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(),
        version=SERVICE_VERSION,
        environment=settings.environment,
        live_connections=rooms.connection_count,
    )
