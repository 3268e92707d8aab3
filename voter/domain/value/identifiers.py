"""Strongly typed identifiers for board voting entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Core domain entity identifiers
UserId = NewType("UserId", UUID)
BoardId = NewType("BoardId", UUID)
SuggestionId = NewType("SuggestionId", UUID)
VoteId = NewType("VoteId", UUID)
