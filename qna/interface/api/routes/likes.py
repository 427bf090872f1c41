"""Like routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status

from qna.application.usecase.like import (
    ToggleLikeRequest,
    ToggleLikeResponse,
    ToggleLikeUseCase,
)
from qna.domain.error import ConflictError, NotFoundError, StorageError, UnauthorizedError
from qna.domain.service import JWTService

router = APIRouter(tags=["likes"], route_class=DishkaRoute)


@router.put("/answers/{answer_id}/like", response_model=ToggleLikeResponse)
async def toggle_like(
    answer_id: str,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ToggleLikeResponse:
    """Like an answer, or unlike it if the caller already likes it.

    Requires authentication. The response carries the caller's new like
    state and the answer's like count after the toggle.

    Args:
        answer_id: Answer UUID
        toggle_like_use_case: Toggle like use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        New like state and like count

    Raises:
        HTTPException: 401 without a valid session, 404 for an unknown
            answer, 409 on an unresolved concurrent toggle, 503 when
            storage fails
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)

    try:
        return await toggle_like_use_case.execute(
            ToggleLikeRequest(answer_id=answer_id, user_id=user_id)
        )
    except UnauthorizedError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ConflictError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )
    except StorageError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
