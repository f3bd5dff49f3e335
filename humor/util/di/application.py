"""Use case providers."""

from dishka import Scope, provide_all

from humor.application.usecase.auth import GetCurrentUserUseCase, LoginUseCase
from humor.application.usecase.caption import (
    GetCaptionUseCase,
    GetRandomUnvotedCaptionUseCase,
    GetVotedHistoryUseCase,
)
from humor.application.usecase.example import ListCaptionExamplesUseCase
from humor.application.usecase.vote import GetUserVoteUseCase, SubmitVoteUseCase
from humor.util.di.base import ProviderBase


class ApplicationProvider(ProviderBase):
    """Every use case, wired from its constructor signature."""

    scope = Scope.REQUEST

    auth = provide_all(LoginUseCase, GetCurrentUserUseCase)
    votes = provide_all(SubmitVoteUseCase, GetUserVoteUseCase)
    captions = provide_all(
        GetRandomUnvotedCaptionUseCase,
        GetCaptionUseCase,
        GetVotedHistoryUseCase,
    )
    examples = provide_all(ListCaptionExamplesUseCase)
