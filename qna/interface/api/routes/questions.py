"""Question routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel, Field

from qna.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionResponse,
    CreateQuestionUseCase,
    GetQuestionRequest,
    GetQuestionResponse,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
)
from qna.domain.error import NotFoundError
from qna.domain.service import JWTService

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


class CreateQuestionAPIRequest(BaseModel):
    """API request for asking a question."""

    title: str = Field(min_length=1, max_length=300)
    description: str | None = Field(default=None, max_length=10000)
    topic_names: list[str] = Field(default_factory=list, max_length=5)


@router.get("", response_model=ListQuestionsResponse)
async def list_questions(
    use_case: FromDishka[ListQuestionsUseCase],
    topic: str | None = None,
    limit: int = 30,
    offset: int = 0,
) -> ListQuestionsResponse:
    """List questions newest first.

    Args:
        use_case: List questions use case (injected)
        topic: Optional topic name filter
        limit: Page size (1-100)
        offset: Page offset

    Returns:
        Page of questions with total count

    Example:
        GET /questions?topic=Python&limit=10
    """
    try:
        request = ListQuestionsRequest(topic=topic, limit=limit, offset=offset)
        return await use_case.execute(request)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.post(
    "",
    response_model=CreateQuestionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_question(
    request: CreateQuestionAPIRequest,
    create_question_use_case: FromDishka[CreateQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateQuestionResponse:
    """Ask a question.

    Requires authentication.

    Args:
        request: Question title, description and topics
        create_question_use_case: Create question use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created question

    Raises:
        HTTPException: If not authenticated or a topic is unknown
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to ask questions",
        )

    try:
        use_case_request = CreateQuestionRequest(
            title=request.title,
            description=request.description,
            topic_names=request.topic_names,
            author_id=user_id,
        )
        return await create_question_use_case.execute(use_case_request)
    except NotFoundError as e:
        # Token outlived its user
        logfire.warn("Question creation failed - user not found", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to ask questions",
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get("/{question_id}", response_model=GetQuestionResponse)
async def get_question(
    question_id: str,
    get_question_use_case: FromDishka[GetQuestionUseCase],
) -> GetQuestionResponse:
    """Get a single question.

    Raises:
        HTTPException: 404 if the question does not exist
    """
    try:
        return await get_question_use_case.execute(
            GetQuestionRequest(question_id=question_id)
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
