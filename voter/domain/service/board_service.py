"""Board administration domain service."""

from datetime import datetime
from typing import Any, Optional
from uuid import uuid4

import logfire

from voter.domain.error import InvalidConfigurationError, NotFoundError
from voter.domain.model.board import Board
from voter.domain.repository import BoardRepository
from voter.domain.value import BoardId, UserId, VotingType

from .base import Service
from .suggestion_service import SuggestionService

# Settings an admin may change after creation
UPDATABLE_FIELDS = frozenset(
    {
        "title",
        "description",
        "suggestions_open",
        "voting_open",
        "closed",
        "require_approval",
        "voting_type",
        "max_votes",
    }
)


class BoardService(Service):
    """Domain service for creating and configuring boards."""

    def __init__(
        self,
        board_repository: BoardRepository,
        suggestion_service: SuggestionService,
    ) -> None:
        """Initialize board service.

        Args:
            board_repository: Board repository
            suggestion_service: Suggestion lifecycle service
        """
        self.board_repository = board_repository
        self.suggestion_service = suggestion_service

    async def create_board(
        self,
        title: str,
        created_by: UserId,
        description: str = "",
        suggestions_open: bool = True,
        voting_open: bool = True,
        require_approval: bool = False,
        voting_type: VotingType | str = VotingType.SINGLE,
        max_votes: Optional[int] = None,
    ) -> Board:
        """Create a board.

        Raises:
            InvalidConfigurationError: If the voting type or max_votes is invalid
        """
        with logfire.span(
            "board_service.create_board",
            title=title,
            created_by=str(created_by),
        ):
            board = Board(
                id=BoardId(uuid4()),
                title=title,
                description=description,
                created_by=created_by,
                suggestions_open=suggestions_open,
                voting_open=voting_open,
                require_approval=require_approval,
                voting_type=voting_type,
                max_votes=max_votes,
                created_at=datetime.now(),
            )
            saved = await self.board_repository.save(board)
            logfire.info(
                "Board created",
                board_id=str(saved.id),
                voting_type=saved.voting_type.value,
                max_votes=saved.max_votes,
            )
            return saved

    async def get_board(self, board_id: BoardId) -> Board:
        """Get a board by ID.

        Raises:
            NotFoundError: If the board does not exist
        """
        board = await self.board_repository.find_by_id(board_id)
        if not board:
            logfire.warn("Board not found", board_id=str(board_id))
            raise NotFoundError("Board", str(board_id))
        return board

    async def list_boards(self) -> list[Board]:
        """List all boards, newest first."""
        return await self.board_repository.find_all()

    async def update_board(self, board_id: BoardId, changes: dict[str, Any]) -> Board:
        """Apply setting changes to a board.

        The full configuration is re-validated. Closing a board also closes
        voting and suggestions. Toggling require_approval re-derives the
        visibility of pending suggestions.

        Args:
            board_id: Board ID
            changes: Field name to new value

        Returns:
            Updated board

        Raises:
            NotFoundError: If the board does not exist
            InvalidConfigurationError: If a field is not updatable or the
                resulting voting configuration is invalid
        """
        with logfire.span(
            "board_service.update_board",
            board_id=str(board_id),
            fields=sorted(changes),
        ):
            unknown = set(changes) - UPDATABLE_FIELDS
            if unknown:
                raise InvalidConfigurationError(
                    f"Cannot update board fields: {', '.join(sorted(unknown))}"
                )

            board = await self.get_board(board_id)
            updated = Board.model_validate({**board.model_dump(), **changes})
            if updated.closed and not board.closed:
                updated = updated.model_copy(
                    update={"voting_open": False, "suggestions_open": False}
                )

            saved = await self.board_repository.save(updated)
            if saved.require_approval != board.require_approval:
                await self.suggestion_service.refresh_visibility(saved)

            logfire.info("Board updated", board_id=str(board_id))
            return saved

    async def toggle_voting(self, board_id: BoardId) -> Board:
        """Open or close voting on a board."""
        with logfire.span("board_service.toggle_voting", board_id=str(board_id)):
            board = await self.get_board(board_id)
            saved = await self.board_repository.save(
                board.model_copy(update={"voting_open": not board.voting_open})
            )
            logfire.info(
                "Board voting toggled", board_id=str(board_id), voting_open=saved.voting_open
            )
            return saved

    async def toggle_suggestions(self, board_id: BoardId) -> Board:
        """Open or close suggestion submission on a board."""
        with logfire.span("board_service.toggle_suggestions", board_id=str(board_id)):
            board = await self.get_board(board_id)
            saved = await self.board_repository.save(
                board.model_copy(update={"suggestions_open": not board.suggestions_open})
            )
            logfire.info(
                "Board suggestions toggled",
                board_id=str(board_id),
                suggestions_open=saved.suggestions_open,
            )
            return saved

    async def toggle_closed(self, board_id: BoardId) -> Board:
        """Close or reopen a board.

        Closing forces voting and suggestions closed. Reopening only clears
        the closed flag; voting and suggestions stay as they are until
        toggled explicitly.
        """
        with logfire.span("board_service.toggle_closed", board_id=str(board_id)):
            board = await self.get_board(board_id)
            if board.closed:
                update = {"closed": False}
            else:
                update = {"closed": True, "voting_open": False, "suggestions_open": False}

            saved = await self.board_repository.save(board.model_copy(update=update))
            logfire.info("Board status toggled", board_id=str(board_id), closed=saved.closed)
            return saved

    async def delete_board(self, board_id: BoardId) -> None:
        """Delete a board with its suggestions and votes.

        Raises:
            NotFoundError: If the board does not exist
        """
        with logfire.span("board_service.delete_board", board_id=str(board_id)):
            await self.get_board(board_id)
            await self.suggestion_service.delete_for_board(board_id)
            await self.board_repository.delete(board_id)
            logfire.info("Board deleted", board_id=str(board_id))
