"""Question repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from qna.domain.model.question import Question
from qna.domain.value import QuestionId, TopicName


class QuestionRepository(ABC):
    """Repository for Question aggregate."""

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        topic: Optional[TopicName] = None,
        limit: int = 30,
        offset: int = 0,
    ) -> list[Question]:
        """Find questions, newest first.

        Args:
            topic: Only include questions tagged with this topic
            limit: Maximum number of questions to return
            offset: Number of questions to skip

        Returns:
            List of questions
        """
        pass

    @abstractmethod
    async def count(self, topic: Optional[TopicName] = None) -> int:
        """Count questions matching the given filter.

        Args:
            topic: Only count questions tagged with this topic

        Returns:
            Number of matching questions
        """
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a question (create) with its topic links.

        Args:
            question: The question to save

        Returns:
            The saved question
        """
        pass

    @abstractmethod
    async def increment_answer_count(self, question_id: QuestionId) -> None:
        """Atomically increment the answer count by 1.

        Args:
            question_id: Question ID
        """
        pass
