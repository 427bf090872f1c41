"""Get question use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.base import BaseUseCase
from qna.domain.error import NotFoundError
from qna.domain.service import QuestionService
from qna.domain.value import QuestionId

from .list_questions import QuestionListItem


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: str  # UUID string


class GetQuestionResponse(QuestionListItem):
    """Get question response."""


class GetQuestionUseCase(BaseUseCase[GetQuestionRequest, GetQuestionResponse]):
    """Use case for fetching a single question."""

    def __init__(self, question_service: QuestionService) -> None:
        self.question_service = question_service

    async def execute(self, request: GetQuestionRequest) -> GetQuestionResponse:
        """Execute get question flow.

        Raises:
            NotFoundError: If the question does not exist
            ValueError: If the question ID is malformed
        """
        question_id = QuestionId(UUID(request.question_id))

        question = await self.question_service.get_question_by_id(question_id)
        if not question:
            raise NotFoundError("Question", request.question_id)

        return GetQuestionResponse.from_question(question)
