"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase
from .list_my_votes import (
    ListMyVotesRequest,
    ListMyVotesResponse,
    ListMyVotesUseCase,
    MyVoteItem,
)
from .retract_vote import RetractVoteRequest, RetractVoteResponse, RetractVoteUseCase

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "ListMyVotesRequest",
    "ListMyVotesResponse",
    "ListMyVotesUseCase",
    "MyVoteItem",
    "RetractVoteRequest",
    "RetractVoteResponse",
    "RetractVoteUseCase",
]
