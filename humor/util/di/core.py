"""Configuration providers."""

from dishka import Scope, provide

from humor.config import AuthSettings, Settings, VotingSettings
from humor.util.di.base import ProviderBase


class ConfigProvider(ProviderBase):
    """Settings read once from the environment, plus the groups services need."""

    scope = Scope.APP

    @provide
    def settings(self) -> Settings:
        return Settings()

    @provide
    def auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def voting_settings(self, settings: Settings) -> VotingSettings:
        return settings.voting
