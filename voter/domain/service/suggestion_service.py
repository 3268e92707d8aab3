"""Suggestion lifecycle domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from voter.domain.error import (
    InvalidTransitionError,
    NotFoundError,
    SubmissionClosedError,
)
from voter.domain.model.board import Board
from voter.domain.model.suggestion import Suggestion
from voter.domain.repository import SuggestionRepository, VoteRepository
from voter.domain.value import (
    BoardId,
    SuggestionId,
    SuggestionStatus,
    UserId,
    Viewer,
)

from .base import Service


def derive_visibility(status: SuggestionStatus, require_approval: bool) -> bool:
    """Compute the stored visibility flag for a suggestion.

    Approved suggestions are visible. Pending ones are visible only on boards
    that publish without approval. Rejected ones never are.
    """
    if status == SuggestionStatus.APPROVED:
        return True
    if status == SuggestionStatus.PENDING:
        return not require_approval
    return False


def is_listed_for(suggestion: Suggestion, viewer: Viewer) -> bool:
    """Whether a suggestion appears in a viewer's board listing.

    Admins see everything. Everyone else sees visible suggestions, plus
    their own submissions that are still waiting for approval.
    """
    if viewer.is_admin or suggestion.visible:
        return True
    return (
        viewer.user_id is not None
        and suggestion.submitted_by == viewer.user_id
        and suggestion.status == SuggestionStatus.PENDING
    )


class SuggestionService(Service):
    """Domain service for the suggestion lifecycle.

    Sole author of suggestion status and visibility changes.
    """

    def __init__(
        self,
        suggestion_repository: SuggestionRepository,
        vote_repository: VoteRepository,
    ) -> None:
        """Initialize suggestion service.

        Args:
            suggestion_repository: Suggestion repository
            vote_repository: Vote repository (for cascading deletes)
        """
        self.suggestion_repository = suggestion_repository
        self.vote_repository = vote_repository

    async def submit(self, board: Board, text: str, submitter: UserId) -> Suggestion:
        """Submit a new suggestion to a board.

        Args:
            board: Target board
            text: Suggestion text
            submitter: Submitting user ID

        Returns:
            Created suggestion: pending and hidden if the board requires
            approval, otherwise approved and visible

        Raises:
            SubmissionClosedError: If the board is closed or not accepting suggestions
        """
        with logfire.span(
            "suggestion_service.submit",
            board_id=str(board.id),
            submitter=str(submitter),
            require_approval=board.require_approval,
        ):
            if not board.accepts_suggestions:
                logfire.warn(
                    "Submission to closed board",
                    board_id=str(board.id),
                    suggestions_open=board.suggestions_open,
                    closed=board.closed,
                )
                raise SubmissionClosedError(str(board.id))

            status = (
                SuggestionStatus.PENDING
                if board.require_approval
                else SuggestionStatus.APPROVED
            )
            suggestion = Suggestion(
                id=SuggestionId(uuid4()),
                board_id=board.id,
                text=text,
                submitted_by=submitter,
                status=status,
                # A fresh suggestion is either approved or awaiting approval
                visible=status == SuggestionStatus.APPROVED,
                submitted_at=datetime.now(),
            )

            saved = await self.suggestion_repository.save(suggestion)
            logfire.info(
                "Suggestion submitted",
                suggestion_id=str(saved.id),
                status=saved.status.value,
            )
            return saved

    async def approve(self, suggestion: Suggestion) -> Suggestion:
        """Approve a pending suggestion, making it visible and votable.

        Args:
            suggestion: Suggestion to approve

        Returns:
            Approved suggestion

        Raises:
            InvalidTransitionError: If the suggestion is not pending
        """
        with logfire.span("suggestion_service.approve", suggestion_id=str(suggestion.id)):
            return await self._transition(
                suggestion, SuggestionStatus.APPROVED, visible=True
            )

    async def reject(self, suggestion: Suggestion) -> Suggestion:
        """Reject a pending suggestion. Rejection is final.

        Args:
            suggestion: Suggestion to reject

        Returns:
            Rejected suggestion

        Raises:
            InvalidTransitionError: If the suggestion is not pending
        """
        with logfire.span("suggestion_service.reject", suggestion_id=str(suggestion.id)):
            return await self._transition(
                suggestion, SuggestionStatus.REJECTED, visible=False
            )

    async def _transition(
        self, suggestion: Suggestion, target: SuggestionStatus, visible: bool
    ) -> Suggestion:
        if suggestion.status != SuggestionStatus.PENDING:
            logfire.warn(
                "Invalid suggestion transition",
                suggestion_id=str(suggestion.id),
                current=suggestion.status.value,
                target=target.value,
            )
            raise InvalidTransitionError(
                str(suggestion.id), suggestion.status.value, target.value
            )

        updated = await self.suggestion_repository.update_status(
            suggestion.id,
            expected=SuggestionStatus.PENDING,
            status=target,
            visible=visible,
        )
        if updated is None:
            # Lost a race with another moderator, or the suggestion is gone
            current = await self.suggestion_repository.find_by_id(suggestion.id)
            if current is None:
                raise NotFoundError("Suggestion", str(suggestion.id))
            logfire.warn(
                "Suggestion transition lost race",
                suggestion_id=str(suggestion.id),
                current=current.status.value,
                target=target.value,
            )
            raise InvalidTransitionError(
                str(suggestion.id), current.status.value, target.value
            )

        logfire.info(
            "Suggestion status changed",
            suggestion_id=str(suggestion.id),
            status=updated.status.value,
        )
        return updated

    async def get_suggestion(self, suggestion_id: SuggestionId) -> Suggestion:
        """Get a suggestion by ID.

        Raises:
            NotFoundError: If the suggestion does not exist
        """
        suggestion = await self.suggestion_repository.find_by_id(suggestion_id)
        if not suggestion:
            logfire.warn("Suggestion not found", suggestion_id=str(suggestion_id))
            raise NotFoundError("Suggestion", str(suggestion_id))
        return suggestion

    async def list_pending(self, board_id: BoardId | None = None) -> list[Suggestion]:
        """List suggestions awaiting moderation, oldest first."""
        with logfire.span(
            "suggestion_service.list_pending",
            board_id=str(board_id) if board_id else None,
        ):
            return await self.suggestion_repository.find_pending(board_id)

    async def refresh_visibility(self, board: Board) -> int:
        """Re-derive visibility of a board's pending suggestions.

        Called when a board's require_approval flag changes. Approved and
        rejected suggestions are unaffected.

        Args:
            board: Board with its new settings

        Returns:
            Number of suggestions updated
        """
        with logfire.span(
            "suggestion_service.refresh_visibility",
            board_id=str(board.id),
            require_approval=board.require_approval,
        ):
            visible = derive_visibility(
                SuggestionStatus.PENDING, board.require_approval
            )
            updated = await self.suggestion_repository.update_visibility(
                board.id, SuggestionStatus.PENDING, visible
            )
            logfire.info(
                "Pending suggestion visibility refreshed",
                board_id=str(board.id),
                visible=visible,
                updated=updated,
            )
            return updated

    async def delete_suggestion(self, suggestion_id: SuggestionId) -> None:
        """Delete a suggestion and its votes.

        Raises:
            NotFoundError: If the suggestion does not exist
        """
        with logfire.span(
            "suggestion_service.delete_suggestion", suggestion_id=str(suggestion_id)
        ):
            removed_votes = await self.vote_repository.delete_by_suggestion(
                suggestion_id
            )
            deleted = await self.suggestion_repository.delete(suggestion_id)
            if not deleted:
                raise NotFoundError("Suggestion", str(suggestion_id))
            logfire.info(
                "Suggestion deleted",
                suggestion_id=str(suggestion_id),
                removed_votes=removed_votes,
            )

    async def delete_for_board(self, board_id: BoardId) -> int:
        """Delete every suggestion on a board along with their votes.

        Returns:
            Number of suggestions deleted
        """
        removed_votes = await self.vote_repository.delete_by_board(board_id)
        deleted = await self.suggestion_repository.delete_by_board(board_id)
        logfire.info(
            "Board suggestions deleted",
            board_id=str(board_id),
            suggestions=deleted,
            votes=removed_votes,
        )
        return deleted
