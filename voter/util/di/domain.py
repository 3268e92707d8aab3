"""Domain layer DI providers."""

from dishka import Scope, provide

from voter.config import VotingSettings
from voter.domain.repository import (
    BoardRepository,
    SuggestionRepository,
    VoteRepository,
)
from voter.domain.service import (
    BoardService,
    BoardViewService,
    SuggestionService,
    VoteService,
)
from voter.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each request gets fresh service instances sharing one transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_suggestion_service(
        self,
        suggestion_repository: SuggestionRepository,
        vote_repository: VoteRepository,
    ) -> SuggestionService:
        """Provide suggestion lifecycle service."""
        return SuggestionService(
            suggestion_repository=suggestion_repository,
            vote_repository=vote_repository,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        voting_settings: VotingSettings,
    ) -> VoteService:
        """Provide vote eligibility service."""
        return VoteService(
            vote_repository=vote_repository,
            voting_settings=voting_settings,
        )

    @provide
    def get_board_service(
        self,
        board_repository: BoardRepository,
        suggestion_service: SuggestionService,
    ) -> BoardService:
        """Provide board administration service."""
        return BoardService(
            board_repository=board_repository,
            suggestion_service=suggestion_service,
        )

    @provide
    def get_board_view_service(
        self,
        board_repository: BoardRepository,
        suggestion_repository: SuggestionRepository,
        vote_repository: VoteRepository,
    ) -> BoardViewService:
        """Provide board view projection service."""
        return BoardViewService(
            board_repository=board_repository,
            suggestion_repository=suggestion_repository,
            vote_repository=vote_repository,
        )
