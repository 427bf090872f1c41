"""Configuration providers."""

from dishka import Scope, provide

from qna.config import AuthSettings, DatabaseSettings, Settings
from qna.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings read once per container from the environment and ``.env``."""

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_database_settings(self, settings: Settings) -> DatabaseSettings:
        return settings.database
