"""Domain value objects for board voting.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum
from typing import Optional

from voter.domain.value.common import ValueObject
from voter.domain.value.identifiers import UserId


class VotingType(str, Enum):
    """How many votes a user may cast on one board.

    - SINGLE: one vote per user per board
    - MULTIPLE: several votes per user per board, optionally capped
    """

    SINGLE = "single"
    MULTIPLE = "multiple"


class SuggestionStatus(str, Enum):
    """Moderation status of a suggestion.

    PENDING -> APPROVED or PENDING -> REJECTED; REJECTED is terminal.
    """

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class UserRole(str, Enum):
    """Role of the identity making a request."""

    USER = "user"
    ADMIN = "admin"


class Viewer(ValueObject):
    """Resolved identity of the caller.

    Authentication happens outside the core; this only carries the result.
    An anonymous viewer has no user ID.
    """

    user_id: Optional[UserId] = None
    role: UserRole = UserRole.USER

    @property
    def is_admin(self) -> bool:
        """Whether the viewer holds elevated privileges."""
        return self.role == UserRole.ADMIN

    @property
    def is_anonymous(self) -> bool:
        """Whether the viewer is unauthenticated."""
        return self.user_id is None

    @classmethod
    def anonymous(cls) -> "Viewer":
        """Viewer with no identity."""
        return cls()
