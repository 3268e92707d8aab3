"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from voter.domain.model import Board, Suggestion, Vote
from voter.domain.value import (
    BoardId,
    SuggestionId,
    SuggestionStatus,
    UserId,
    VoteId,
    VotingType,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_board(row: Dict[str, Any]) -> Board:
    """Convert database row to Board domain model.

    Args:
        row: Database row as dict

    Returns:
        Board domain model
    """
    return Board(
        id=BoardId(_uuid(row["id"])),
        title=row["title"],
        description=row.get("description") or "",
        created_by=UserId(_uuid(row["created_by"])),
        suggestions_open=row["suggestions_open"],
        voting_open=row["voting_open"],
        closed=row["closed"],
        require_approval=row["require_approval"],
        voting_type=VotingType(row["voting_type"]),
        max_votes=row.get("max_votes"),
        created_at=row["created_at"],
    )


def board_to_dict(board: Board) -> Dict[str, Any]:
    """Convert Board domain model to database dict.

    Args:
        board: Board domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return board.model_dump(mode="python") | {"voting_type": board.voting_type.value}


def row_to_suggestion(row: Dict[str, Any]) -> Suggestion:
    """Convert database row to Suggestion domain model.

    Args:
        row: Database row as dict

    Returns:
        Suggestion domain model
    """
    return Suggestion(
        id=SuggestionId(_uuid(row["id"])),
        board_id=BoardId(_uuid(row["board_id"])),
        text=row["text"],
        submitted_by=UserId(_uuid(row["submitted_by"])),
        status=SuggestionStatus(row["status"]),
        visible=row["visible"],
        submitted_at=row["submitted_at"],
    )


def suggestion_to_dict(suggestion: Suggestion) -> Dict[str, Any]:
    """Convert Suggestion domain model to database dict."""
    return suggestion.model_dump(mode="python") | {"status": suggestion.status.value}


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(_uuid(row["id"])),
        suggestion_id=SuggestionId(_uuid(row["suggestion_id"])),
        board_id=BoardId(_uuid(row["board_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return vote.model_dump()
