"""Answer routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel, Field

from qna.application.usecase.answer import (
    CreateAnswerRequest,
    CreateAnswerResponse,
    CreateAnswerUseCase,
    ListAnswersRequest,
    ListAnswersResponse,
    ListAnswersUseCase,
)
from qna.domain.error import NotFoundError
from qna.domain.service import JWTService

router = APIRouter(prefix="/questions", tags=["answers"], route_class=DishkaRoute)


class CreateAnswerAPIRequest(BaseModel):
    """API request for answering a question."""

    text: str = Field(min_length=1, max_length=10000)


@router.get("/{question_id}/answers", response_model=ListAnswersResponse)
async def list_answers(
    question_id: str,
    list_answers_use_case: FromDishka[ListAnswersUseCase],
    auth_token: str | None = Cookie(default=None),
) -> ListAnswersResponse:
    """List answers to a question, oldest first.

    Authentication is optional; when present, each answer reports whether
    the caller likes it.

    Args:
        question_id: Question UUID
        list_answers_use_case: List answers use case from DI
        auth_token: JWT token from cookie (optional)

    Returns:
        Answers with like counts and the caller's like state

    Raises:
        HTTPException: 404 if the question does not exist
    """
    try:
        return await list_answers_use_case.execute(
            ListAnswersRequest(question_id=question_id, auth_token=auth_token)
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.post(
    "/{question_id}/answers",
    response_model=CreateAnswerResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_answer(
    question_id: str,
    request: CreateAnswerAPIRequest,
    create_answer_use_case: FromDishka[CreateAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateAnswerResponse:
    """Answer a question.

    Requires authentication.

    Args:
        question_id: Question UUID
        request: Answer text
        create_answer_use_case: Create answer use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created answer details

    Raises:
        HTTPException: If not authenticated or the question does not exist
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to answer questions",
        )

    try:
        use_case_request = CreateAnswerRequest(
            question_id=question_id,
            text=request.text,
            author_id=user_id,
        )
        return await create_answer_use_case.execute(use_case_request)
    except NotFoundError as e:
        if e.resource == "User":
            logfire.warn("Answer creation failed - user not found", error=str(e))
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Authentication required to answer questions",
            )
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
