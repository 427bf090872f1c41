"""List questions use case."""

import logfire
from datetime import datetime

from pydantic import BaseModel, Field

from qna.application.usecase.base import BaseUseCase
from qna.domain.model import Question
from qna.domain.service import QuestionService
from qna.domain.value import TopicName, Username


class QuestionListItem(BaseModel):
    """Question list item in response."""

    question_id: str
    title: str
    description: str | None
    topic_names: list[str]
    author_id: str
    author_username: Username
    answer_count: int
    created_at: datetime

    @classmethod
    def from_question(cls, question: Question) -> "QuestionListItem":
        return cls(
            question_id=str(question.id),
            title=question.title,
            description=question.description,
            topic_names=[name.root for name in question.topic_names],
            author_id=str(question.author_id),
            author_username=question.author_username,
            answer_count=question.answer_count,
            created_at=question.created_at,
        )


class ListQuestionsRequest(BaseModel):
    """List questions request."""

    topic: str | None = None  # Filter by topic name
    limit: int = Field(default=30, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListQuestionsResponse(BaseModel):
    """List questions response."""

    questions: list[QuestionListItem]
    total: int
    limit: int
    offset: int


class ListQuestionsUseCase(BaseUseCase[ListQuestionsRequest, ListQuestionsResponse]):
    """Use case for listing questions with topic filtering and pagination."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize list questions use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow.

        Args:
            request: List questions request with filter and pagination

        Returns:
            Questions newest first, with the total matching count
        """
        with logfire.span(
            "list_questions.execute",
            topic=request.topic,
            limit=request.limit,
            offset=request.offset,
        ):
            topic_filter = TopicName(request.topic) if request.topic else None

            questions, total = await self.question_service.list_questions(
                topic=topic_filter,
                limit=request.limit,
                offset=request.offset,
            )

            logfire.info("Questions listed", count=len(questions), total=total)

            return ListQuestionsResponse(
                questions=[QuestionListItem.from_question(q) for q in questions],
                total=total,
                limit=request.limit,
                offset=request.offset,
            )
