"""List answers use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.base import BaseUseCase
from qna.domain.error import NotFoundError
from qna.domain.service import AnswerService, JWTService, LikeService, QuestionService
from qna.domain.value import QuestionId, UserId, Username


class AnswerItem(BaseModel):
    """Answer item in response."""

    answer_id: str
    question_id: str
    text: str
    author_id: str
    author_username: Username
    like_count: int
    liked_by_me: bool
    created_at: datetime


class ListAnswersRequest(BaseModel):
    """List answers request."""

    question_id: str  # UUID string
    auth_token: str | None = None  # JWT token for authentication (optional)


class ListAnswersResponse(BaseModel):
    """List answers response."""

    question_id: str
    answers: list[AnswerItem]
    total: int


class ListAnswersUseCase(BaseUseCase[ListAnswersRequest, ListAnswersResponse]):
    """Use case for listing the answers to a question."""

    def __init__(
        self,
        answer_service: AnswerService,
        question_service: QuestionService,
        like_service: LikeService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize list answers use case.

        Args:
            answer_service: Answer domain service
            question_service: Question domain service
            like_service: Like service for checking the caller's likes
            jwt_service: JWT service for decoding auth tokens
        """
        self.answer_service = answer_service
        self.question_service = question_service
        self.like_service = like_service
        self.jwt_service = jwt_service

    async def execute(self, request: ListAnswersRequest) -> ListAnswersResponse:
        """Execute list answers flow.

        Answers come back oldest first. ``liked_by_me`` is only ever true
        for a caller with a valid token; an invalid token reads as anonymous.

        Args:
            request: List answers request with question ID and optional auth token

        Returns:
            List of answers with like state

        Raises:
            NotFoundError: If the question does not exist
            ValueError: If the question ID is malformed
        """
        question_id = QuestionId(UUID(request.question_id))

        question = await self.question_service.get_question_by_id(question_id)
        if not question:
            raise NotFoundError("Question", request.question_id)

        answers = await self.answer_service.get_answers_for_question(question_id)

        liked: dict[str, bool] = {}
        user_id = self.jwt_service.get_user_id_from_token(request.auth_token)
        if user_id and answers:
            # Batch query for all likes
            likes_map = await self.like_service.get_user_likes_for_answers(
                user_id=UserId(UUID(user_id)),
                answer_ids=[answer.id for answer in answers],
            )
            liked = {str(aid): is_liked for aid, is_liked in likes_map.items()}

        answer_items = [
            AnswerItem(
                answer_id=str(answer.id),
                question_id=str(answer.question_id),
                text=answer.text,
                author_id=str(answer.author_id),
                author_username=answer.author_username,
                like_count=answer.like_count,
                liked_by_me=liked.get(str(answer.id), False),
                created_at=answer.created_at,
            )
            for answer in answers
        ]

        return ListAnswersResponse(
            question_id=request.question_id,
            answers=answer_items,
            total=len(answer_items),
        )
