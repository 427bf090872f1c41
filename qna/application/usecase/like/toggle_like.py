"""Toggle like use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.base import BaseUseCase
from qna.domain.error import UnauthorizedError
from qna.domain.service import LikeService
from qna.domain.value import AnswerId, UserId


class ToggleLikeRequest(BaseModel):
    """Toggle like request."""

    answer_id: str  # UUID string
    user_id: str | None = None  # User ID from authenticated user, None if anonymous


class ToggleLikeResponse(BaseModel):
    """Toggle like response."""

    answer_id: str
    liked: bool
    like_count: int


class ToggleLikeUseCase(BaseUseCase[ToggleLikeRequest, ToggleLikeResponse]):
    """Use case for liking or unliking an answer."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize toggle like use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        """Execute toggle like flow.

        Args:
            request: Toggle like request

        Returns:
            The caller's new like state and the answer's new like count

        Raises:
            UnauthorizedError: If there is no authenticated caller
            NotFoundError: If the answer does not exist
            ConflictError: If a concurrent toggle could not be resolved
            StorageError: On persistence failure
            ValueError: If an ID is malformed
        """
        if not request.user_id:
            # Anonymous callers are refused before the answer id is looked at
            raise UnauthorizedError("Authentication required to like answers")

        answer_id = AnswerId(UUID(request.answer_id))
        user_id = UserId(UUID(request.user_id))

        result = await self.like_service.toggle_like(answer_id, user_id)

        return ToggleLikeResponse(
            answer_id=request.answer_id,
            liked=result.liked,
            like_count=result.like_count,
        )
