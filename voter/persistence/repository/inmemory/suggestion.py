"""In-memory suggestion repository for testing."""

from typing import Optional

from voter.domain.model import Suggestion
from voter.domain.repository import SuggestionRepository
from voter.domain.value import BoardId, SuggestionId, SuggestionStatus


class InMemorySuggestionRepository(SuggestionRepository):
    """In-memory implementation of SuggestionRepository for testing."""

    def __init__(self) -> None:
        self._suggestions: dict[SuggestionId, Suggestion] = {}

    async def find_by_id(self, suggestion_id: SuggestionId) -> Optional[Suggestion]:
        """Find a suggestion by ID."""
        return self._suggestions.get(suggestion_id)

    async def find_by_board(self, board_id: BoardId) -> list[Suggestion]:
        """Find all suggestions on a board, oldest first."""
        suggestions = [s for s in self._suggestions.values() if s.board_id == board_id]
        suggestions.sort(key=lambda s: s.submitted_at)
        return suggestions

    async def find_pending(self, board_id: Optional[BoardId] = None) -> list[Suggestion]:
        """Find pending suggestions, oldest first."""
        suggestions = [
            s
            for s in self._suggestions.values()
            if s.status == SuggestionStatus.PENDING
            and (board_id is None or s.board_id == board_id)
        ]
        suggestions.sort(key=lambda s: s.submitted_at)
        return suggestions

    async def save(self, suggestion: Suggestion) -> Suggestion:
        """Save a suggestion (create or update)."""
        self._suggestions[suggestion.id] = suggestion
        return suggestion

    async def update_status(
        self,
        suggestion_id: SuggestionId,
        expected: SuggestionStatus,
        status: SuggestionStatus,
        visible: bool,
    ) -> Optional[Suggestion]:
        """Compare-and-set the status of a suggestion."""
        current = self._suggestions.get(suggestion_id)
        if current is None or current.status != expected:
            return None

        updated = current.model_copy(update={"status": status, "visible": visible})
        self._suggestions[suggestion_id] = updated
        return updated

    async def update_visibility(
        self,
        board_id: BoardId,
        status: SuggestionStatus,
        visible: bool,
    ) -> int:
        """Set visibility for all suggestions on a board with a status."""
        matching = [
            s
            for s in self._suggestions.values()
            if s.board_id == board_id and s.status == status
        ]
        for suggestion in matching:
            self._suggestions[suggestion.id] = suggestion.model_copy(
                update={"visible": visible}
            )
        return len(matching)

    async def delete(self, suggestion_id: SuggestionId) -> bool:
        """Delete a suggestion."""
        return self._suggestions.pop(suggestion_id, None) is not None

    async def delete_by_board(self, board_id: BoardId) -> int:
        """Delete every suggestion on a board."""
        doomed = [sid for sid, s in self._suggestions.items() if s.board_id == board_id]
        for suggestion_id in doomed:
            del self._suggestions[suggestion_id]
        return len(doomed)
