"""Core DI providers (non-mockable)."""

from dishka import Scope, from_context, provide

from voter.config import Settings, VotingSettings
from voter.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are handed in through the container context, so whoever builds
    the container decides where they come from.
    """

    settings = from_context(provides=Settings, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def provide_voting_settings(self, settings: Settings) -> VotingSettings:
        """Provide vote eligibility settings."""
        return settings.voting
