"""Answer repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from qna.domain.model.answer import Answer
from qna.domain.value import AnswerId, QuestionId


class AnswerRepository(ABC):
    """Repository for Answer entity.

    Besides plain reads and creation, this repository owns the only
    writes to ``like_count``: atomic increments and decrements.
    """

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def lock_for_update(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer and lock its row until the transaction ends.

        Concurrent lockers of the same answer wait for each other, so
        their read-then-write sequences on its likes are serialized.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        """Find all answers for a question, oldest first.

        Args:
            question_id: The question's unique identifier

        Returns:
            List of answers
        """
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create).

        Args:
            answer: The answer to save

        Returns:
            The saved answer
        """
        pass

    @abstractmethod
    async def increment_like_count(self, answer_id: AnswerId) -> Optional[int]:
        """Atomically increment like_count by 1.

        Args:
            answer_id: Answer ID

        Returns:
            The new like_count, or None if the answer does not exist
        """
        pass

    @abstractmethod
    async def decrement_like_count(self, answer_id: AnswerId) -> Optional[int]:
        """Atomically decrement like_count by 1.

        Args:
            answer_id: Answer ID

        Returns:
            The new like_count, or None if the answer does not exist
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all answers."""
        pass
