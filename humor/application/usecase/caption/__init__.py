"""Caption use cases."""

from .common import CaptionAuthorInfo, CaptionImageInfo, CaptionItem
from .get_caption import GetCaptionRequest, GetCaptionResponse, GetCaptionUseCase
from .get_random_unvoted_caption import (
    GetRandomUnvotedCaptionRequest,
    GetRandomUnvotedCaptionResponse,
    GetRandomUnvotedCaptionUseCase,
)
from .get_voted_history import (
    GetVotedHistoryRequest,
    GetVotedHistoryResponse,
    GetVotedHistoryUseCase,
)

__all__ = [
    "CaptionAuthorInfo",
    "CaptionImageInfo",
    "CaptionItem",
    "GetCaptionRequest",
    "GetCaptionResponse",
    "GetCaptionUseCase",
    "GetRandomUnvotedCaptionRequest",
    "GetRandomUnvotedCaptionResponse",
    "GetRandomUnvotedCaptionUseCase",
    "GetVotedHistoryRequest",
    "GetVotedHistoryResponse",
    "GetVotedHistoryUseCase",
]
