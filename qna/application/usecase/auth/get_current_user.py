"""Get current user use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.base import BaseUseCase
from qna.domain.service import JWTService, UserService
from qna.domain.value import UserId, Username


class GetCurrentUserRequest(BaseModel):
    token: str


class GetCurrentUserResponse(BaseModel):
    """The signed-in account, without its password hash."""

    user_id: str
    username: Username
    email: str
    created_at: datetime


class GetCurrentUserUseCase(BaseUseCase[GetCurrentUserRequest, GetCurrentUserResponse]):
    """Resolve a session token to the account it was issued for."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Look up the token's user.

        Raises:
            JWTError: If the token is invalid or expired
            NotFoundError: If the account no longer exists
        """
        payload = self.jwt_service.verify_token(request.token)
        user = await self.user_service.get_by_id(UserId(UUID(payload.user_id)))

        return GetCurrentUserResponse(
            user_id=str(user.id),
            username=user.username,
            email=user.email,
            created_at=user.created_at,
        )
