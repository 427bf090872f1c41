"""Create answer use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from qna.application.usecase.base import BaseUseCase
from qna.domain.error import NotFoundError
from qna.domain.service import AnswerService, QuestionService, UserService
from qna.domain.value import QuestionId, UserId, Username


class CreateAnswerRequest(BaseModel):
    """Create answer request."""

    question_id: str  # UUID string
    text: str = Field(min_length=1, max_length=10000)
    author_id: str  # User ID from authenticated user


class CreateAnswerResponse(BaseModel):
    """Create answer response."""

    answer_id: str
    question_id: str
    text: str
    author_id: str
    author_username: Username
    like_count: int
    created_at: datetime


class CreateAnswerUseCase(BaseUseCase[CreateAnswerRequest, CreateAnswerResponse]):
    """Use case for answering a question."""

    def __init__(
        self,
        answer_service: AnswerService,
        question_service: QuestionService,
        user_service: UserService,
    ) -> None:
        """Initialize create answer use case.

        Args:
            answer_service: Answer domain service
            question_service: Question domain service
            user_service: User domain service
        """
        self.answer_service = answer_service
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: CreateAnswerRequest) -> CreateAnswerResponse:
        """Execute create answer flow.

        Steps:
        1. Verify question exists via question service
        2. Load the author via user service
        3. Create answer via answer service
        4. Update question's answer count via question service

        Args:
            request: Create answer request

        Returns:
            Create answer response with answer details

        Raises:
            NotFoundError: If the question or the author does not exist
            ValueError: If the question ID is malformed
        """
        question_id = QuestionId(UUID(request.question_id))

        with logfire.span(
            "create_answer.execute",
            question_id=request.question_id,
            author_id=request.author_id,
        ):
            question = await self.question_service.get_question_by_id(question_id)
            if not question:
                raise NotFoundError("Question", request.question_id)

            author = await self.user_service.get_by_id(UserId(UUID(request.author_id)))

            answer = await self.answer_service.create_answer(
                question_id=question_id,
                author_id=author.id,
                author_username=author.username,
                text=request.text,
            )

            await self.question_service.increment_answer_count(question_id)

            return CreateAnswerResponse(
                answer_id=str(answer.id),
                question_id=str(answer.question_id),
                text=answer.text,
                author_id=str(answer.author_id),
                author_username=answer.author_username,
                like_count=answer.like_count,
                created_at=answer.created_at,
            )
