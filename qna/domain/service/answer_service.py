"""Answer domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from qna.domain.model.answer import Answer
from qna.domain.repository import AnswerRepository
from qna.domain.value import AnswerId, QuestionId, UserId, Username

from .base import Service


class AnswerService(Service):
    """Domain service for answer operations."""

    def __init__(self, answer_repository: AnswerRepository) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
        """
        self.answer_repository = answer_repository

    async def create_answer(
        self,
        question_id: QuestionId,
        author_id: UserId,
        author_username: Username,
        text: str,
    ) -> Answer:
        """Create an answer with no likes.

        Args:
            question_id: Question being answered (must exist)
            author_id: Author's user ID
            author_username: Author's username (denormalized)
            text: Answer body

        Returns:
            Saved answer
        """
        with logfire.span(
            "answer_service.create_answer",
            question_id=str(question_id),
            author_id=str(author_id),
        ):
            answer = Answer(
                id=AnswerId(uuid4()),
                question_id=question_id,
                author_id=author_id,
                author_username=author_username,
                text=text,
                like_count=0,
                created_at=datetime.now(),
            )
            saved = await self.answer_repository.save(answer)
            logfire.info("Answer saved", answer_id=str(saved.id))
            return saved

    async def get_answer_by_id(self, answer_id: AnswerId) -> Answer | None:
        """Get an answer by ID.

        Args:
            answer_id: Answer ID

        Returns:
            Answer if found, None otherwise
        """
        with logfire.span("answer_service.get_answer_by_id", answer_id=str(answer_id)):
            return await self.answer_repository.find_by_id(answer_id)

    async def get_answers_for_question(self, question_id: QuestionId) -> list[Answer]:
        """Get all answers to a question, oldest first.

        Args:
            question_id: Question ID

        Returns:
            List of answers
        """
        with logfire.span(
            "answer_service.get_answers_for_question", question_id=str(question_id)
        ):
            answers = await self.answer_repository.find_by_question(question_id)
            logfire.info(
                "Answers retrieved", question_id=str(question_id), count=len(answers)
            )
            return answers
