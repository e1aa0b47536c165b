"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .transaction import InMemoryTransaction
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryTransaction",
    "InMemoryUserRepository",
]
