"""Create question use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from qna.application.usecase.base import BaseUseCase
from qna.domain.service import QuestionService, TopicService, UserService
from qna.domain.value import TopicName, UserId, Username


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    title: str = Field(min_length=1, max_length=300)
    description: str | None = Field(default=None, max_length=10000)
    topic_names: list[str] = Field(default_factory=list, max_length=5)
    author_id: str  # User ID from authenticated user


class CreateQuestionResponse(BaseModel):
    """Create question response."""

    question_id: str
    title: str
    description: str | None
    topic_names: list[str]
    author_id: str
    author_username: Username
    answer_count: int
    created_at: datetime


class CreateQuestionUseCase(BaseUseCase[CreateQuestionRequest, CreateQuestionResponse]):
    """Use case for asking a new question."""

    def __init__(
        self,
        question_service: QuestionService,
        topic_service: TopicService,
        user_service: UserService,
    ) -> None:
        """Initialize create question use case.

        Args:
            question_service: Question domain service
            topic_service: Topic domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.topic_service = topic_service
        self.user_service = user_service

    async def execute(self, request: CreateQuestionRequest) -> CreateQuestionResponse:
        """Execute create question flow.

        Steps:
        1. Load the author
        2. Validate all topics exist
        3. Save the question with its topics

        Args:
            request: Create question request

        Returns:
            Create question response

        Raises:
            NotFoundError: If the author does not exist
            ValueError: If any topic does not exist
        """
        with logfire.span("create_question.execute", author_id=request.author_id):
            author = await self.user_service.get_by_id(UserId(UUID(request.author_id)))

            # Deduplicate while keeping the caller's order
            topic_names = [
                TopicName(name) for name in dict.fromkeys(request.topic_names)
            ]
            if topic_names:
                await self.topic_service.validate_topics_exist(topic_names)

            question = await self.question_service.create_question(
                title=request.title,
                description=request.description,
                author_id=author.id,
                author_username=author.username,
                topic_names=topic_names,
            )

            return CreateQuestionResponse(
                question_id=str(question.id),
                title=question.title,
                description=question.description,
                topic_names=[name.root for name in question.topic_names],
                author_id=str(question.author_id),
                author_username=question.author_username,
                answer_count=question.answer_count,
                created_at=question.created_at,
            )
