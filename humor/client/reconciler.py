"""Optimistic vote reconciliation for one displayed caption.

A vote is shown immediately, then confirmed against the API. If the write
fails, the displayed vote and score go back to what they were before the
vote and an error message is shown for a short time.
"""

import asyncio
from typing import Awaitable, Callable
from uuid import UUID

import httpx
import logfire

from humor.application.usecase.vote import SubmitVoteResponse
from humor.config import VotingSettings
from humor.domain.model import ClientVoteState, VoteTransition, next_vote_state
from humor.domain.value import VoteValue

from .error import ClientError

VoteSubmitter = Callable[[UUID, VoteValue], Awaitable[SubmitVoteResponse]]

LOGIN_REQUIRED_MESSAGE = "Please log in to vote"
SUBMIT_FAILED_MESSAGE = "Failed to submit vote"


class VoteReconciler:
    """Displayed vote state for a caption, kept in step with the store.

    Must be used from a running event loop. Votes on different captions use
    separate reconcilers and never wait on each other. Votes on the same
    caption while a write is pending are sent as they come; the store
    decides the final value.
    """

    def __init__(
        self,
        caption_id: UUID,
        submit_vote: VoteSubmitter,
        state: ClientVoteState | None = None,
        authenticated: bool = True,
        error_display_seconds: float = VotingSettings().error_display_seconds,
    ) -> None:
        """Initialize reconciler.

        Args:
            caption_id: Caption whose vote is displayed
            submit_vote: Authoritative write, e.g. ``HumorApiClient.submit_vote``
            state: Initially displayed vote and score
            authenticated: Whether the viewer is known to be logged in
            error_display_seconds: How long an error message stays visible
        """
        self.caption_id = caption_id
        self.submit_vote = submit_vote
        self.state = state or ClientVoteState()
        self.authenticated = authenticated
        self.error_display_seconds = error_display_seconds

        self.error: str | None = None
        self._clear_error_task: asyncio.Task | None = None
        self._pending: set[asyncio.Task] = set()

    @classmethod
    def from_settings(
        cls,
        caption_id: UUID,
        submit_vote: VoteSubmitter,
        settings: VotingSettings,
        state: ClientVoteState | None = None,
        authenticated: bool = True,
    ) -> "VoteReconciler":
        """Build a reconciler using ``VOTING__ERROR_DISPLAY_SECONDS``."""
        return cls(
            caption_id,
            submit_vote,
            state=state,
            authenticated=authenticated,
            error_display_seconds=settings.error_display_seconds,
        )

    @property
    def vote_value(self) -> VoteValue | None:
        return self.state.vote

    @property
    def score(self) -> int:
        return self.state.score

    def vote(self, action: VoteValue) -> asyncio.Task | None:
        """Apply a vote locally and start confirming it.

        The displayed state changes before this returns. The returned task
        completes once the write has been confirmed or reverted.

        Args:
            action: Vote the user cast

        Returns:
            Confirmation task, or None if the vote was refused locally
        """
        if not self.authenticated:
            self._show_error(LOGIN_REQUIRED_MESSAGE)
            return None

        transition = next_vote_state(self.state, action)
        self.state = transition.current

        task = asyncio.create_task(self._confirm(transition, VoteValue(action)))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def wait(self) -> None:
        """Wait for all in-flight writes to be confirmed or reverted."""
        if self._pending:
            await asyncio.gather(*list(self._pending))

    async def _confirm(self, transition: VoteTransition, action: VoteValue) -> None:
        try:
            result = await self.submit_vote(self.caption_id, action)
        except (ClientError, httpx.HTTPError) as e:
            logfire.warn(
                "Vote write raised", caption_id=str(self.caption_id), error=str(e)
            )
            self._revert(transition, SUBMIT_FAILED_MESSAGE)
            return

        if not result.success:
            self._revert(transition, result.error or SUBMIT_FAILED_MESSAGE)

    def _revert(self, transition: VoteTransition, message: str) -> None:
        logfire.info(
            "Reverting vote",
            caption_id=str(self.caption_id),
            error=message,
        )
        self.state = transition.previous
        self._show_error(message)

    def _show_error(self, message: str) -> None:
        # A newer message replaces the old one and gets the full display time
        if self._clear_error_task is not None:
            self._clear_error_task.cancel()
        self.error = message
        self._clear_error_task = asyncio.create_task(self._clear_error_later())

    async def _clear_error_later(self) -> None:
        await asyncio.sleep(self.error_display_seconds)
        self.error = None
        self._clear_error_task = None
