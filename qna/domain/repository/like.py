"""Like repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from qna.domain.model.like import Like
from qna.domain.value import AnswerId, LikeId, UserId

# Name of the one-like-per-user-and-answer unique constraint
UNIQUE_LIKE_CONSTRAINT = "uq_like_user_answer"


class LikeRepository(ABC):
    """Repository for Like entity.

    Defines the contract for the likes ledger.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_user_and_answer(
        self, user_id: UserId, answer_id: AnswerId
    ) -> Optional[Like]:
        """Find a user's like on a specific answer.

        Args:
            user_id: The user's ID
            answer_id: The answer's ID

        Returns:
            The like if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_answers(
        self, user_id: UserId, answer_ids: Sequence[AnswerId]
    ) -> list[Like]:
        """Find a user's likes on multiple answers (batch query).

        Args:
            user_id: The user's ID
            answer_ids: Answer IDs to check

        Returns:
            List of likes by the user on the specified answers
        """
        pass

    @abstractmethod
    async def save(self, like: Like) -> Like:
        """Save a like (create).

        A failed insert leaves the surrounding transaction usable.

        Args:
            like: The like to save

        Returns:
            The saved like

        Raises:
            IntegrityError: If the user already likes this answer (naming
                UNIQUE_LIKE_CONSTRAINT) or a referenced row is missing
        """
        pass

    @abstractmethod
    async def delete(self, like_id: LikeId) -> bool:
        """Delete a like by ID.

        Args:
            like_id: The like ID to delete

        Returns:
            True if a like was deleted, False if it no longer existed
        """
        pass

    @abstractmethod
    async def count_by_answer(self, answer_id: AnswerId) -> int:
        """Count likes on a specific answer.

        Args:
            answer_id: The answer's ID

        Returns:
            Number of likes
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all likes."""
        pass
