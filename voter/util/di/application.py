"""Application layer DI providers."""

from dishka import Scope, provide

from voter.application.usecase.board import (
    CreateBoardUseCase,
    DeleteBoardUseCase,
    GetBoardViewUseCase,
    ListBoardsUseCase,
    ToggleBoardUseCase,
    UpdateBoardUseCase,
)
from voter.application.usecase.suggestion import (
    DeleteSuggestionUseCase,
    ListPendingSuggestionsUseCase,
    ReviewSuggestionUseCase,
    SubmitSuggestionUseCase,
)
from voter.application.usecase.vote import (
    CastVoteUseCase,
    ListMyVotesUseCase,
    RetractVoteUseCase,
)
from voter.domain.service import (
    BoardService,
    BoardViewService,
    SuggestionService,
    VoteService,
)
from voter.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Board use cases
    @provide(scope=Scope.REQUEST)
    def get_create_board_use_case(self, board_service: BoardService) -> CreateBoardUseCase:
        """Provide create board use case."""
        return CreateBoardUseCase(board_service=board_service)

    @provide(scope=Scope.REQUEST)
    def get_update_board_use_case(self, board_service: BoardService) -> UpdateBoardUseCase:
        """Provide update board use case."""
        return UpdateBoardUseCase(board_service=board_service)

    @provide(scope=Scope.REQUEST)
    def get_toggle_board_use_case(self, board_service: BoardService) -> ToggleBoardUseCase:
        """Provide toggle board use case."""
        return ToggleBoardUseCase(board_service=board_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_board_use_case(self, board_service: BoardService) -> DeleteBoardUseCase:
        """Provide delete board use case."""
        return DeleteBoardUseCase(board_service=board_service)

    @provide(scope=Scope.REQUEST)
    def get_list_boards_use_case(
        self, board_view_service: BoardViewService
    ) -> ListBoardsUseCase:
        """Provide list boards use case."""
        return ListBoardsUseCase(board_view_service=board_view_service)

    @provide(scope=Scope.REQUEST)
    def get_board_view_use_case(
        self, board_view_service: BoardViewService
    ) -> GetBoardViewUseCase:
        """Provide get board view use case."""
        return GetBoardViewUseCase(board_view_service=board_view_service)

    # Suggestion use cases
    @provide(scope=Scope.REQUEST)
    def get_submit_suggestion_use_case(
        self,
        board_service: BoardService,
        suggestion_service: SuggestionService,
    ) -> SubmitSuggestionUseCase:
        """Provide submit suggestion use case."""
        return SubmitSuggestionUseCase(
            board_service=board_service,
            suggestion_service=suggestion_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_review_suggestion_use_case(
        self, suggestion_service: SuggestionService
    ) -> ReviewSuggestionUseCase:
        """Provide review suggestion use case."""
        return ReviewSuggestionUseCase(suggestion_service=suggestion_service)

    @provide(scope=Scope.REQUEST)
    def get_list_pending_suggestions_use_case(
        self, suggestion_service: SuggestionService
    ) -> ListPendingSuggestionsUseCase:
        """Provide list pending suggestions use case."""
        return ListPendingSuggestionsUseCase(suggestion_service=suggestion_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_suggestion_use_case(
        self, suggestion_service: SuggestionService
    ) -> DeleteSuggestionUseCase:
        """Provide delete suggestion use case."""
        return DeleteSuggestionUseCase(suggestion_service=suggestion_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self,
        board_service: BoardService,
        suggestion_service: SuggestionService,
        vote_service: VoteService,
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(
            board_service=board_service,
            suggestion_service=suggestion_service,
            vote_service=vote_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_retract_vote_use_case(
        self,
        suggestion_service: SuggestionService,
        vote_service: VoteService,
    ) -> RetractVoteUseCase:
        """Provide retract vote use case."""
        return RetractVoteUseCase(
            suggestion_service=suggestion_service,
            vote_service=vote_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_my_votes_use_case(
        self,
        board_service: BoardService,
        vote_service: VoteService,
    ) -> ListMyVotesUseCase:
        """Provide list my votes use case."""
        return ListMyVotesUseCase(
            board_service=board_service,
            vote_service=vote_service,
        )
