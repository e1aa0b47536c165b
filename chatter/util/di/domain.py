"""Domain layer DI providers."""

from dishka import Scope, provide_all

from chatter.domain.service import (
    CommentService,
    JWTService,
    NotificationService,
    ReactionService,
    ThreadService,
    UserService,
)
from chatter.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services.

    REQUEST scope: services hold the request's repositories, and through them
    its database session.
    """

    scope = Scope.REQUEST

    services = provide_all(
        JWTService,
        UserService,
        CommentService,
        ReactionService,
        ThreadService,
        NotificationService,
    )
