"""In-memory question repository for testing."""

from typing import Optional

from qna.domain.model.question import Question
from qna.domain.repository import QuestionRepository
from qna.domain.value import QuestionId, TopicName

from .store import InMemoryStore


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def _filtered(self, topic: Optional[TopicName]) -> list[Question]:
        questions = list(self._store.questions.values())
        if topic is not None:
            questions = [q for q in questions if topic in q.topic_names]
        return questions

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        return self._store.questions.get(question_id)

    async def find_all(
        self,
        topic: Optional[TopicName] = None,
        limit: int = 30,
        offset: int = 0,
    ) -> list[Question]:
        """Find questions, newest first."""
        questions = self._filtered(topic)
        questions.sort(key=lambda q: q.created_at, reverse=True)
        return questions[offset : offset + limit]

    async def count(self, topic: Optional[TopicName] = None) -> int:
        """Count questions matching the given filter."""
        return len(self._filtered(topic))

    async def save(self, question: Question) -> Question:
        """Save a question."""
        self._store.questions[question.id] = question
        return question

    async def increment_answer_count(self, question_id: QuestionId) -> None:
        """Increment the answer count by 1."""
        question = self._store.questions.get(question_id)
        if question:
            self._store.questions[question_id] = question.model_copy(
                update={"answer_count": question.answer_count + 1}
            )
