"""In-memory answer repository for testing."""

from typing import Optional

from qna.domain.model.answer import Answer
from qna.domain.repository import AnswerRepository
from qna.domain.value import AnswerId, QuestionId

from .store import InMemoryStore, constraint_violation


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        return self._store.answers.get(answer_id)

    async def lock_for_update(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer; the store lock held by the transaction serializes."""
        return self._store.answers.get(answer_id)

    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        """Find all answers for a question, oldest first."""
        answers = [
            a for a in self._store.answers.values() if a.question_id == question_id
        ]
        answers.sort(key=lambda a: a.created_at)
        return answers

    async def save(self, answer: Answer) -> Answer:
        """Save an answer."""
        self._store.answers[answer.id] = answer
        return answer

    async def increment_like_count(self, answer_id: AnswerId) -> Optional[int]:
        """Increment like_count by 1."""
        answer = self._store.answers.get(answer_id)
        if not answer:
            return None
        updated = answer.model_copy(update={"like_count": answer.like_count + 1})
        self._store.answers[answer_id] = updated
        return updated.like_count

    async def decrement_like_count(self, answer_id: AnswerId) -> Optional[int]:
        """Decrement like_count by 1.

        Raises:
            IntegrityError: If like_count would go below zero
        """
        answer = self._store.answers.get(answer_id)
        if not answer:
            return None
        if answer.like_count == 0:
            raise constraint_violation("UPDATE answers", "like_count_non_negative")
        updated = answer.model_copy(update={"like_count": answer.like_count - 1})
        self._store.answers[answer_id] = updated
        return updated.like_count

    async def count(self) -> int:
        """Count all answers."""
        return len(self._store.answers)
