"""PostgreSQL repository implementations."""

from chatter.persistence.repository.comment import PostgresCommentRepository
from chatter.persistence.repository.transaction import SessionTransaction
from chatter.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresCommentRepository",
    "SessionTransaction",
]
