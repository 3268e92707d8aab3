"""Board aggregate root.

A board is a voting campaign: participants submit suggestions to it and
vote on them under the board's rules.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field, model_validator

from voter.domain.error import InvalidConfigurationError
from voter.domain.model.common import DomainModel
from voter.domain.value import BoardId, UserId, VotingType


def parse_voting_type(value: Any) -> VotingType:
    """Coerce a raw voting type into a VotingType.

    Strings are matched case-insensitively ("Single", "multiple").

    Raises:
        InvalidConfigurationError: If the value is not a known voting type
    """
    if isinstance(value, VotingType):
        return value
    if isinstance(value, str):
        try:
            return VotingType(value.strip().lower())
        except ValueError:
            pass
    raise InvalidConfigurationError(
        f"Unknown voting type {value!r}; expected one of "
        + ", ".join(t.value for t in VotingType)
    )


def validate_max_votes(value: Any) -> Optional[int]:
    """Check that max_votes is absent or a positive integer.

    Raises:
        InvalidConfigurationError: If the value is not a positive integer
    """
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidConfigurationError(
            f"max_votes must be a positive integer, got {value!r}"
        )
    return value


class Board(DomainModel):
    """Board aggregate root.

    Business rules:
    - voting_type is either single or multiple
    - max_votes, when set, is a positive integer
    - max_votes only applies to multiple-vote boards (cleared for single)
    - created_by never changes after creation
    """

    id: BoardId
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(default="", max_length=1000)
    created_by: UserId
    suggestions_open: bool = True
    voting_open: bool = True
    closed: bool = False
    require_approval: bool = False
    voting_type: VotingType = VotingType.SINGLE
    max_votes: Optional[int] = None
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="before")
    @classmethod
    def validate_voting_rules(cls, data: Any) -> Any:
        """Validate voting configuration before field coercion.

        Runs before pydantic's own checks so that a bad voting setup surfaces
        as InvalidConfigurationError rather than a generic validation error.
        """
        if not isinstance(data, dict):
            return data

        data = dict(data)
        voting_type = parse_voting_type(data.get("voting_type", VotingType.SINGLE))
        max_votes = validate_max_votes(data.get("max_votes"))

        data["voting_type"] = voting_type
        data["max_votes"] = max_votes if voting_type == VotingType.MULTIPLE else None
        return data

    @property
    def vote_limit(self) -> Optional[int]:
        """Maximum votes per user on this board, None if unlimited."""
        if self.voting_type == VotingType.SINGLE:
            return 1
        return self.max_votes

    @property
    def accepts_suggestions(self) -> bool:
        """Whether new suggestions can be submitted."""
        return self.suggestions_open and not self.closed
