"""Caption example routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from humor.application.usecase.example import (
    ListCaptionExamplesRequest,
    ListCaptionExamplesResponse,
    ListCaptionExamplesUseCase,
)
from humor.domain.service import JWTService

router = APIRouter(tags=["caption-examples"], route_class=DishkaRoute)


@router.get("/caption-examples", response_model=ListCaptionExamplesResponse)
async def list_caption_examples(
    use_case: FromDishka[ListCaptionExamplesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListCaptionExamplesResponse:
    """List the curated caption examples. Requires a session."""
    session = jwt_service.get_session(auth_token)
    return await use_case.execute(ListCaptionExamplesRequest(session=session))
