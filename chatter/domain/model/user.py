"""User aggregate root.

Users register with a username, email and password, and authenticate
with email and password to obtain a bearer token.
"""

from pydantic import Field

from chatter.domain.model.common import DomainModel
from chatter.domain.value import UserId
from chatter.domain.value.types import Email, Username


class User(DomainModel):
    """User aggregate root.

    ``password_hash`` is an opaque Argon2id hash string and must never be
    exposed through the API.
    """

    id: UserId
    username: Username
    email: Email
    password_hash: str = Field(repr=False)
