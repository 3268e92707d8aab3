"""Domain layer errors.

Every rejection the voting core can produce is a subclass of DomainError.
Callers map them to transport-specific responses; none of them are retried
internally.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class InvalidConfigurationError(DomainError):
    """Raised when a board is configured with invalid voting rules."""

    pass


class SubmissionClosedError(DomainError):
    """Raised when submitting to a board that does not accept suggestions."""

    def __init__(self, board_id: str):
        self.board_id = board_id
        super().__init__(f"Suggestions are not currently open for board {board_id}")


class InvalidTransitionError(DomainError):
    """Raised when a suggestion status change is not allowed."""

    def __init__(self, suggestion_id: str, current: str, target: str):
        self.suggestion_id = suggestion_id
        self.current = current
        self.target = target
        super().__init__(
            f"Cannot move suggestion {suggestion_id} from {current} to {target}"
        )


class VotingClosedError(DomainError):
    """Raised when voting is not open on the board."""

    def __init__(self, board_id: str):
        self.board_id = board_id
        super().__init__(f"Voting is not currently open for board {board_id}")


class BoardClosedError(DomainError):
    """Raised when the board has been closed."""

    def __init__(self, board_id: str):
        self.board_id = board_id
        super().__init__(f"Board {board_id} is closed")


class SuggestionNotApprovedError(DomainError):
    """Raised when voting on a suggestion that is not approved."""

    def __init__(self, suggestion_id: str):
        self.suggestion_id = suggestion_id
        super().__init__(f"Cannot vote on unapproved suggestion {suggestion_id}")


class DuplicateVoteError(DomainError):
    """Raised when the user already voted on the suggestion."""

    def __init__(self, suggestion_id: str, user_id: str):
        self.suggestion_id = suggestion_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} has already voted for suggestion {suggestion_id}"
        )


class VoteLimitExceededError(DomainError):
    """Raised when the user has used up their votes on the board."""

    def __init__(self, board_id: str, limit: int):
        self.board_id = board_id
        self.limit = limit
        if limit == 1:
            detail = "this board only allows one vote per user"
        else:
            detail = f"you have reached the maximum number of votes ({limit})"
        super().__init__(f"Vote limit of {limit} reached on board {board_id}: {detail}")


class VoteNotFoundError(DomainError):
    """Raised when retracting a vote that does not exist."""

    def __init__(self, suggestion_id: str, user_id: str):
        self.suggestion_id = suggestion_id
        self.user_id = user_id
        super().__init__(f"User {user_id} has no vote on suggestion {suggestion_id}")


class NotAuthorizedError(DomainError):
    """Raised when a non-admin attempts an admin-only operation."""

    def __init__(self, action: str, user_id: str | None):
        self.action = action
        super().__init__(f"User {user_id or 'anonymous'} is not authorized to {action}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
