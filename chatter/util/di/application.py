"""Application layer DI providers."""

from dishka import Scope, provide_all

from chatter.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from chatter.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    GetRepliesUseCase,
    ReactToCommentUseCase,
    UpdateCommentUseCase,
)
from chatter.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Use cases, built per request from their constructor annotations."""

    scope = Scope.REQUEST

    auth = provide_all(RegisterUseCase, LoginUseCase, GetCurrentUserUseCase)

    comments = provide_all(
        CreateCommentUseCase,
        UpdateCommentUseCase,
        DeleteCommentUseCase,
        ReactToCommentUseCase,
        GetCommentsUseCase,
        GetRepliesUseCase,
    )
