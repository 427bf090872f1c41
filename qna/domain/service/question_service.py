"""Question domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from qna.domain.model.question import Question
from qna.domain.repository import QuestionRepository
from qna.domain.value import QuestionId, TopicName, UserId, Username

from .base import Service


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(self, question_repository: QuestionRepository) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
        """
        self.question_repository = question_repository

    async def create_question(
        self,
        title: str,
        description: Optional[str],
        author_id: UserId,
        author_username: Username,
        topic_names: list[TopicName],
    ) -> Question:
        """Create and save a question.

        Topics must already have been validated by the caller.

        Args:
            title: Question title
            description: Optional body text
            author_id: Author's user ID
            author_username: Author's username (denormalized)
            topic_names: Topics to tag the question with

        Returns:
            Saved question
        """
        with logfire.span(
            "question_service.create_question",
            author_id=str(author_id),
            topic_count=len(topic_names),
        ):
            question = Question(
                id=QuestionId(uuid4()),
                title=title,
                description=description,
                author_id=author_id,
                author_username=author_username,
                topic_names=topic_names,
                answer_count=0,
                created_at=datetime.now(),
            )
            saved = await self.question_repository.save(question)
            logfire.info("Question saved", question_id=str(saved.id))
            return saved

    async def get_question_by_id(self, question_id: QuestionId) -> Question | None:
        """Get a question by ID.

        Args:
            question_id: Question ID

        Returns:
            Question if found, None otherwise
        """
        with logfire.span(
            "question_service.get_question_by_id", question_id=str(question_id)
        ):
            question = await self.question_repository.find_by_id(question_id)
            if not question:
                logfire.warn("Question not found", question_id=str(question_id))
            return question

    async def list_questions(
        self, topic: Optional[TopicName] = None, limit: int = 30, offset: int = 0
    ) -> tuple[list[Question], int]:
        """List questions newest first.

        Args:
            topic: Optional topic filter
            limit: Page size
            offset: Page offset

        Returns:
            Tuple of (questions on this page, total matching questions)
        """
        with logfire.span(
            "question_service.list_questions",
            topic=topic.root if topic else None,
            limit=limit,
            offset=offset,
        ):
            questions = await self.question_repository.find_all(
                topic=topic, limit=limit, offset=offset
            )
            total = await self.question_repository.count(topic=topic)
            return questions, total

    async def increment_answer_count(self, question_id: QuestionId) -> None:
        """Atomically increment a question's answer count.

        Args:
            question_id: Question ID
        """
        with logfire.span(
            "question_service.increment_answer_count", question_id=str(question_id)
        ):
            await self.question_repository.increment_answer_count(question_id)
