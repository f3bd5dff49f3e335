"""HTTP client for the caption voting API.

Wraps the JSON endpoints for callers outside the server process. The
session token travels in the ``auth_token`` cookie, the same way a browser
sends it.
"""

from typing import TypeVar
from uuid import UUID

import httpx
import logfire
from pydantic import BaseModel, ValidationError

from humor.application.usecase.caption import (
    GetCaptionResponse,
    GetRandomUnvotedCaptionResponse,
    GetVotedHistoryResponse,
)
from humor.application.usecase.vote import GetUserVoteResponse, SubmitVoteResponse
from humor.domain.value import VoteValue

from .error import ApiRequestError

ModelT = TypeVar("ModelT", bound=BaseModel)


class HumorApiClient:
    """Async client for the caption voting API."""

    def __init__(
        self,
        base_url: str,
        auth_token: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 10.0,
    ) -> None:
        """Initialize API client.

        Args:
            base_url: API base URL, e.g. http://localhost:8000
            auth_token: Session token issued at login (optional)
            transport: Optional httpx transport (tests pass a MockTransport
                or an ASGITransport)
            timeout: Request timeout in seconds
        """
        cookies = {"auth_token": auth_token} if auth_token else None
        self._client = httpx.AsyncClient(
            base_url=base_url,
            cookies=cookies,
            transport=transport,
            timeout=timeout,
        )

    async def __aenter__(self) -> "HumorApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(
        self, method: str, path: str, response_model: type[ModelT], **kwargs
    ) -> ModelT:
        """Call an endpoint and parse its body into ``response_model``.

        Raises:
            ApiRequestError: If the request fails, the status is not 200 or
                the body is not the expected JSON
        """
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logfire.error("API request failed", method=method, path=path, error=str(e))
            raise ApiRequestError(f"HTTP error calling {path}: {e}") from e

        if response.status_code != 200:
            logfire.error(
                "API returned error status",
                method=method,
                path=path,
                status_code=response.status_code,
            )
            raise ApiRequestError(
                f"{method} {path} failed: {response.status_code}",
                status_code=response.status_code,
            )

        # A proxy error page or an unexpected shape counts as a failed call
        try:
            return response_model.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logfire.error(
                "API returned unreadable body",
                method=method,
                path=path,
                error=str(e),
            )
            raise ApiRequestError(
                f"{method} {path} returned an unexpected body",
                status_code=response.status_code,
            ) from e

    async def submit_vote(
        self, caption_id: UUID, vote_value: VoteValue
    ) -> SubmitVoteResponse:
        """Vote on a caption.

        Raises:
            ApiRequestError: If the request itself fails
        """
        return await self._request(
            "POST",
            f"/captions/{caption_id}/vote",
            SubmitVoteResponse,
            json={"vote_value": int(vote_value)},
        )

    async def get_user_vote(self, caption_id: UUID) -> VoteValue | None:
        response = await self._request(
            "GET", f"/captions/{caption_id}/vote", GetUserVoteResponse
        )
        return response.vote

    async def get_random_caption(self) -> GetRandomUnvotedCaptionResponse:
        return await self._request(
            "GET", "/captions/random", GetRandomUnvotedCaptionResponse
        )

    async def get_caption(self, caption_id: UUID) -> GetCaptionResponse:
        return await self._request(
            "GET", f"/captions/{caption_id}", GetCaptionResponse
        )

    async def get_voted_history(
        self, page: int = 1, per_page: int | None = None
    ) -> GetVotedHistoryResponse:
        params = {"page": page}
        if per_page is not None:
            params["per_page"] = per_page
        return await self._request(
            "GET", "/votes/history", GetVotedHistoryResponse, params=params
        )
