"""Caption example use cases."""

from .list_caption_examples import (
    CaptionExampleItem,
    ListCaptionExamplesRequest,
    ListCaptionExamplesResponse,
    ListCaptionExamplesUseCase,
)

__all__ = [
    "CaptionExampleItem",
    "ListCaptionExamplesRequest",
    "ListCaptionExamplesResponse",
    "ListCaptionExamplesUseCase",
]
