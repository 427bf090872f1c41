"""In-memory like repository for testing."""

from typing import Optional, Sequence

from qna.domain.model.like import Like
from qna.domain.repository import UNIQUE_LIKE_CONSTRAINT, LikeRepository
from qna.domain.value import AnswerId, LikeId, UserId

from .store import InMemoryStore, constraint_violation


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_user_and_answer(
        self, user_id: UserId, answer_id: AnswerId
    ) -> Optional[Like]:
        """Find a user's like on a specific answer."""
        for like in self._store.likes.values():
            if like.user_id == user_id and like.answer_id == answer_id:
                return like
        return None

    async def find_by_user_and_answers(
        self, user_id: UserId, answer_ids: Sequence[AnswerId]
    ) -> list[Like]:
        """Find a user's likes on multiple answers (batch query)."""
        if not answer_ids:
            return []

        wanted = set(answer_ids)
        return [
            like
            for like in self._store.likes.values()
            if like.user_id == user_id and like.answer_id in wanted
        ]

    async def save(self, like: Like) -> Like:
        """Save a like.

        Raises:
            IntegrityError: If the user already likes this answer
        """
        for existing in self._store.likes.values():
            if existing.user_id == like.user_id and existing.answer_id == like.answer_id:
                raise constraint_violation("INSERT INTO likes", UNIQUE_LIKE_CONSTRAINT)

        self._store.likes[like.id] = like
        return like

    async def delete(self, like_id: LikeId) -> bool:
        """Delete a like by ID."""
        return self._store.likes.pop(like_id, None) is not None

    async def count_by_answer(self, answer_id: AnswerId) -> int:
        """Count likes on a specific answer."""
        return sum(1 for like in self._store.likes.values() if like.answer_id == answer_id)

    async def count(self) -> int:
        """Count all likes."""
        return len(self._store.likes)
