"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .notification_service import BroadcastChannel, NotificationService
from .reaction_service import ReactionResult, ReactionService
from .thread_service import ThreadPage, ThreadService
from .user_service import UserService

__all__ = [
    "BroadcastChannel",
    "CommentService",
    "JWTService",
    "NotificationService",
    "ReactionResult",
    "ReactionService",
    "Service",
    "ThreadPage",
    "ThreadService",
    "UserService",
]
