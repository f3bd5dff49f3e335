"""Vote history routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query

from humor.application.usecase.caption import (
    GetVotedHistoryRequest,
    GetVotedHistoryResponse,
    GetVotedHistoryUseCase,
)
from humor.domain.service import JWTService

router = APIRouter(prefix="/votes", tags=["votes"], route_class=DishkaRoute)


@router.get("/history", response_model=GetVotedHistoryResponse)
async def get_voted_history(
    use_case: FromDishka[GetVotedHistoryUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1, ge=1),
    per_page: int | None = Query(default=None, ge=1),
    auth_token: str | None = Cookie(default=None),
) -> GetVotedHistoryResponse:
    """Page through the captions the caller has voted on, newest vote first."""
    session = jwt_service.get_session(auth_token)
    return await use_case.execute(
        GetVotedHistoryRequest(session=session, page=page, per_page=per_page)
    )
