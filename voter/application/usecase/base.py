"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel

from voter.domain.error import NotAuthorizedError


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


class AdminRequest(BaseModel):
    """Request made on behalf of a caller who may be a board admin."""

    user_id: str  # User ID from authenticated user
    is_admin: bool = False


def ensure_admin(request: AdminRequest, action: str) -> None:
    """Reject callers without admin rights.

    Raises:
        NotAuthorizedError: If the caller is not an admin
    """
    if not request.is_admin:
        raise NotAuthorizedError(action, request.user_id)
