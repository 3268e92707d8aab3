"""Suggestion use cases."""

from .delete_suggestion import (
    DeleteSuggestionRequest,
    DeleteSuggestionResponse,
    DeleteSuggestionUseCase,
)
from .details import SuggestionDetails
from .list_pending_suggestions import (
    ListPendingSuggestionsRequest,
    ListPendingSuggestionsResponse,
    ListPendingSuggestionsUseCase,
)
from .review_suggestion import (
    ReviewSuggestionRequest,
    ReviewSuggestionResponse,
    ReviewSuggestionUseCase,
)
from .submit_suggestion import (
    SubmitSuggestionRequest,
    SubmitSuggestionResponse,
    SubmitSuggestionUseCase,
)

__all__ = [
    "DeleteSuggestionRequest",
    "DeleteSuggestionResponse",
    "DeleteSuggestionUseCase",
    "ListPendingSuggestionsRequest",
    "ListPendingSuggestionsResponse",
    "ListPendingSuggestionsUseCase",
    "ReviewSuggestionRequest",
    "ReviewSuggestionResponse",
    "ReviewSuggestionUseCase",
    "SubmitSuggestionRequest",
    "SubmitSuggestionResponse",
    "SubmitSuggestionUseCase",
    "SuggestionDetails",
]
