"""Configuration providers (not mockable)."""

from dishka import Scope, provide

from chatter.config import AuthSettings, CommentSettings, Settings
from chatter.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings, read once per container from the environment and ``.env``.

    Services depend on the section they use rather than on ``Settings``.
    """

    scope = Scope.APP

    @provide
    def settings(self) -> Settings:
        return Settings()

    @provide
    def auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def comment_settings(self, settings: Settings) -> CommentSettings:
        return settings.comments
