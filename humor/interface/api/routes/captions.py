"""Caption and vote routes.

Actions answer 200 with a structured body; failures are reported in its
``error`` field rather than as HTTP errors.
"""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel

from humor.application.usecase.caption import (
    GetCaptionRequest,
    GetCaptionResponse,
    GetCaptionUseCase,
    GetRandomUnvotedCaptionRequest,
    GetRandomUnvotedCaptionResponse,
    GetRandomUnvotedCaptionUseCase,
)
from humor.application.usecase.vote import (
    GetUserVoteRequest,
    GetUserVoteResponse,
    GetUserVoteUseCase,
    SubmitVoteRequest,
    SubmitVoteResponse,
    SubmitVoteUseCase,
)
from humor.domain.service import JWTService
from humor.domain.value import VoteValue

router = APIRouter(prefix="/captions", tags=["captions"], route_class=DishkaRoute)


class VoteBody(BaseModel):
    """Vote request body."""

    vote_value: VoteValue  # 1 or -1


# Declared before /{caption_id} so "random" is not parsed as an ID
@router.get("/random", response_model=GetRandomUnvotedCaptionResponse)
async def get_random_caption(
    use_case: FromDishka[GetRandomUnvotedCaptionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetRandomUnvotedCaptionResponse:
    """Get a random public caption the caller has not voted on."""
    session = jwt_service.get_session(auth_token)
    return await use_case.execute(GetRandomUnvotedCaptionRequest(session=session))


@router.get("/{caption_id}", response_model=GetCaptionResponse)
async def get_caption(
    caption_id: UUID,
    use_case: FromDishka[GetCaptionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetCaptionResponse:
    """Get a caption with its vote score and the caller's vote."""
    session = jwt_service.get_session(auth_token)
    return await use_case.execute(
        GetCaptionRequest(caption_id=caption_id, session=session)
    )


@router.post("/{caption_id}/vote", response_model=SubmitVoteResponse)
async def submit_vote(
    caption_id: UUID,
    body: VoteBody,
    use_case: FromDishka[SubmitVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> SubmitVoteResponse:
    """Vote a caption up or down.

    Repeating the current vote withdraws it.

    Example:
        POST /captions/<id>/vote
        {"vote_value": 1}

        Response:
        {"success": true, "error": null, "outcome": "created"}
    """
    session = jwt_service.get_session(auth_token)
    return await use_case.execute(
        SubmitVoteRequest(
            caption_id=caption_id, vote_value=body.vote_value, session=session
        )
    )


@router.get("/{caption_id}/vote", response_model=GetUserVoteResponse)
async def get_user_vote(
    caption_id: UUID,
    use_case: FromDishka[GetUserVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetUserVoteResponse:
    """Get the caller's current vote on a caption."""
    session = jwt_service.get_session(auth_token)
    return await use_case.execute(
        GetUserVoteRequest(caption_id=caption_id, session=session)
    )
