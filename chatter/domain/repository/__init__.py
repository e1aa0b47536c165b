"""Repository interfaces for Chatter domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from chatter.domain.repository.comment import CommentRepository
from chatter.domain.repository.transaction import Transaction
from chatter.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "CommentRepository",
    "Transaction",
]
