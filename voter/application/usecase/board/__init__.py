"""Board use cases."""

from .create_board import CreateBoardRequest, CreateBoardResponse, CreateBoardUseCase
from .delete_board import DeleteBoardRequest, DeleteBoardResponse, DeleteBoardUseCase
from .details import BoardDetails
from .get_board_view import (
    GetBoardViewRequest,
    GetBoardViewResponse,
    GetBoardViewUseCase,
    SuggestionItem,
)
from .list_boards import (
    BoardListItem,
    ListBoardsRequest,
    ListBoardsResponse,
    ListBoardsUseCase,
)
from .toggle_board import ToggleBoardRequest, ToggleBoardResponse, ToggleBoardUseCase
from .update_board import UpdateBoardRequest, UpdateBoardResponse, UpdateBoardUseCase

__all__ = [
    "BoardDetails",
    "BoardListItem",
    "CreateBoardRequest",
    "CreateBoardResponse",
    "CreateBoardUseCase",
    "DeleteBoardRequest",
    "DeleteBoardResponse",
    "DeleteBoardUseCase",
    "GetBoardViewRequest",
    "GetBoardViewResponse",
    "GetBoardViewUseCase",
    "ListBoardsRequest",
    "ListBoardsResponse",
    "ListBoardsUseCase",
    "SuggestionItem",
    "ToggleBoardRequest",
    "ToggleBoardResponse",
    "ToggleBoardUseCase",
    "UpdateBoardRequest",
    "UpdateBoardResponse",
    "UpdateBoardUseCase",
]
