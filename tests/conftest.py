"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from typing import Optional
from uuid import uuid4

from voter.domain.model import Board, Suggestion
from voter.domain.value import (
    BoardId,
    SuggestionId,
    SuggestionStatus,
    UserId,
    UserRole,
    Viewer,
    VotingType,
)


def make_board(
    voting_type: VotingType = VotingType.SINGLE,
    max_votes: Optional[int] = None,
    require_approval: bool = False,
    **overrides,
) -> Board:
    """Build an open board with a fresh ID.

    Args:
        voting_type: Voting type
        max_votes: Per-user vote cap (multiple boards only)
        require_approval: Whether submissions need moderation
        **overrides: Any other Board field

    Returns:
        Board domain model (not saved)
    """
    fields = {
        "id": BoardId(uuid4()),
        "title": "Team offsite ideas",
        "created_by": UserId(uuid4()),
        "voting_type": voting_type,
        "max_votes": max_votes,
        "require_approval": require_approval,
        "created_at": datetime.now(),
    }
    fields.update(overrides)
    return Board(**fields)


def make_suggestion(
    board: Board,
    text: str = "Go bowling",
    status: SuggestionStatus = SuggestionStatus.APPROVED,
    submitted_by: Optional[UserId] = None,
    age: int = 0,
) -> Suggestion:
    """Build a suggestion on a board with visibility consistent with its status.

    Args:
        board: Board the suggestion belongs to
        text: Suggestion text
        status: Lifecycle status
        submitted_by: Submitter, a fresh user when omitted
        age: Seconds before now the suggestion was submitted

    Returns:
        Suggestion domain model (not saved)
    """
    if status == SuggestionStatus.APPROVED:
        visible = True
    elif status == SuggestionStatus.PENDING:
        visible = not board.require_approval
    else:
        visible = False

    return Suggestion(
        id=SuggestionId(uuid4()),
        board_id=board.id,
        text=text,
        submitted_by=submitted_by or UserId(uuid4()),
        status=status,
        visible=visible,
        submitted_at=datetime.now() - timedelta(seconds=age),
    )


def admin_viewer() -> Viewer:
    """A signed-in admin."""
    return Viewer(user_id=UserId(uuid4()), role=UserRole.ADMIN)
