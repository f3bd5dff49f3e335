"""Domain service providers."""

from dishka import Scope, provide, provide_all

from humor.domain.repository import CaptionRepository
from humor.domain.service import (
    AuthService,
    CaptionExampleService,
    CaptionService,
    JWTService,
    ProfileService,
    VoteService,
)
from humor.util.di.base import ProviderBase


class DomainProvider(ProviderBase):
    """Domain services, built per request on top of that request's repositories."""

    scope = Scope.REQUEST

    services = provide_all(
        AuthService,
        JWTService,
        ProfileService,
        VoteService,
        CaptionExampleService,
    )

    @provide
    def caption_service(self, caption_repository: CaptionRepository) -> CaptionService:
        """Caption service with a fresh, unseeded random source."""
        return CaptionService(caption_repository=caption_repository)
