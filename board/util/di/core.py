"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from board.config import (
    CommentSettings,
    ContentSettings,
    CookieSettings,
    ModerationSettings,
    Settings,
)
from board.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_moderation_settings(self, settings: Settings) -> ModerationSettings:
        """Provide moderation settings."""
        return settings.moderation

    @provide(scope=Scope.APP)
    def provide_comment_settings(self, settings: Settings) -> CommentSettings:
        """Provide comment thread settings."""
        return settings.comments

    @provide(scope=Scope.APP)
    def provide_content_settings(self, settings: Settings) -> ContentSettings:
        """Provide content limits."""
        return settings.content

    @provide(scope=Scope.APP)
    def provide_cookie_settings(self, settings: Settings) -> CookieSettings:
        """Provide cookie settings."""
        return settings.cookies
