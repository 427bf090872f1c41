"""Like domain service.

Likes are toggled, never set: each call flips the caller's like on an
answer and moves the answer's ``like_count`` by exactly one in the same
transaction.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from qna.domain.error import ConflictError, NotFoundError, StorageError, UnauthorizedError
from qna.domain.model.like import Like
from qna.domain.repository import (
    UNIQUE_LIKE_CONSTRAINT,
    AnswerRepository,
    LikeRepository,
    TransactionManager,
)
from qna.domain.value import AnswerId, LikeId, UserId

from .base import Service


def _is_duplicate_like(error: IntegrityError) -> bool:
    """Whether an insert failed on the one-like-per-user-and-answer constraint.

    asyncpg reports the constraint on the driver exception, which SQLAlchemy
    keeps as ``orig`` or chains as its cause.
    """
    orig = error.orig
    for candidate in (orig, getattr(orig, "__cause__", None)):
        if getattr(candidate, "constraint_name", None) == UNIQUE_LIKE_CONSTRAINT:
            return True
    return False


@dataclass(frozen=True)
class LikeToggleResult:
    """Outcome of a toggle: the caller's new like state and the new count."""

    liked: bool
    like_count: int


@dataclass(frozen=True)
class LikeCountReport:
    """Comparison of an answer's stored like_count with its likes ledger."""

    answer_id: AnswerId
    like_count: int
    ledger_count: int

    @property
    def consistent(self) -> bool:
        return self.like_count == self.ledger_count


class LikeService(Service):
    """Domain service for like operations."""

    def __init__(
        self,
        like_repository: LikeRepository,
        answer_repository: AnswerRepository,
        transaction_manager: TransactionManager,
    ) -> None:
        """Initialize like service.

        Args:
            like_repository: Like repository (the ledger)
            answer_repository: Answer repository (owns like_count)
            transaction_manager: Atomicity wrapper for ledger and counter writes
        """
        self.like_repository = like_repository
        self.answer_repository = answer_repository
        self.transaction_manager = transaction_manager

    async def toggle_like(
        self, answer_id: AnswerId, user_id: UserId | None
    ) -> LikeToggleResult:
        """Flip the caller's like on an answer.

        Steps (all inside one transaction):
        1. Lock the answer row
        2. Look up the caller's like
        3. Found: delete it and decrement like_count
        4. Not found: insert one and increment like_count

        A duplicate insert means a concurrent toggle by the same user got
        there first; the like now exists, so this call unlikes instead.

        Args:
            answer_id: Answer to toggle
            user_id: Caller identity, None if unauthenticated

        Returns:
            The caller's new like state and the answer's new like_count

        Raises:
            UnauthorizedError: If there is no caller identity
            NotFoundError: If the answer does not exist
            ConflictError: If a concurrent toggle could not be resolved
            StorageError: On any other persistence failure
        """
        if user_id is None:
            logfire.warn("Like toggle without caller identity", answer_id=str(answer_id))
            raise UnauthorizedError("Authentication required to like answers")

        with logfire.span(
            "like_service.toggle_like", answer_id=str(answer_id), user_id=str(user_id)
        ):
            try:
                async with self.transaction_manager.atomic():
                    answer = await self.answer_repository.lock_for_update(answer_id)
                    if not answer:
                        logfire.warn(
                            "Like toggle on non-existent answer",
                            answer_id=str(answer_id),
                        )
                        raise NotFoundError("Answer", str(answer_id))

                    existing = await self.like_repository.find_by_user_and_answer(
                        user_id, answer_id
                    )
                    if existing:
                        result = await self._unlike(existing)
                    else:
                        result = await self._like(user_id, answer_id)
            except SQLAlchemyError as e:
                logfire.error(
                    "Like toggle storage failure",
                    answer_id=str(answer_id),
                    user_id=str(user_id),
                    error=str(e),
                )
                raise StorageError(f"Failed to toggle like on answer {answer_id}") from e

            logfire.info(
                "Like toggled",
                answer_id=str(answer_id),
                user_id=str(user_id),
                liked=result.liked,
                like_count=result.like_count,
            )
            return result

    async def _like(self, user_id: UserId, answer_id: AnswerId) -> LikeToggleResult:
        like = Like(
            id=LikeId(uuid4()),
            user_id=user_id,
            answer_id=answer_id,
            created_at=datetime.now(),
        )

        try:
            await self.like_repository.save(like)
        except IntegrityError as e:
            if not _is_duplicate_like(e):
                # A missing user or answer row, not a racing toggle
                raise
            logfire.warn(
                "Duplicate like insert, resolving as unlike",
                answer_id=str(answer_id),
                user_id=str(user_id),
            )
            existing = await self.like_repository.find_by_user_and_answer(
                user_id, answer_id
            )
            if not existing:
                raise ConflictError("Like", f"{user_id}/{answer_id}")
            return await self._unlike(existing)

        like_count = await self.answer_repository.increment_like_count(answer_id)
        if like_count is None:
            raise NotFoundError("Answer", str(answer_id))
        return LikeToggleResult(liked=True, like_count=like_count)

    async def _unlike(self, like: Like) -> LikeToggleResult:
        deleted = await self.like_repository.delete(like.id)
        if not deleted:
            # Removed by someone else between lookup and delete
            raise ConflictError("Like", f"{like.user_id}/{like.answer_id}")

        like_count = await self.answer_repository.decrement_like_count(like.answer_id)
        if like_count is None:
            raise NotFoundError("Answer", str(like.answer_id))
        return LikeToggleResult(liked=False, like_count=like_count)

    async def get_user_likes_for_answers(
        self, user_id: UserId, answer_ids: list[AnswerId]
    ) -> dict[AnswerId, bool]:
        """Check which answers a user currently likes.

        Args:
            user_id: User ID
            answer_ids: Answer IDs to check

        Returns:
            Dictionary mapping answer ID to whether the user likes it
        """
        if not answer_ids:
            return {}

        likes = await self.like_repository.find_by_user_and_answers(
            user_id=user_id, answer_ids=answer_ids
        )
        liked_ids = {like.answer_id for like in likes}
        return {aid: aid in liked_ids for aid in answer_ids}

    async def check_like_count(self, answer_id: AnswerId) -> LikeCountReport:
        """Compare an answer's like_count with its likes ledger.

        Only reports; drift is never repaired here.

        Args:
            answer_id: Answer ID

        Returns:
            Report with both counts

        Raises:
            NotFoundError: If the answer does not exist
        """
        with logfire.span("like_service.check_like_count", answer_id=str(answer_id)):
            answer = await self.answer_repository.find_by_id(answer_id)
            if not answer:
                raise NotFoundError("Answer", str(answer_id))

            ledger_count = await self.like_repository.count_by_answer(answer_id)
            report = LikeCountReport(
                answer_id=answer_id,
                like_count=answer.like_count,
                ledger_count=ledger_count,
            )
            if not report.consistent:
                logfire.warn(
                    "Like count drift detected",
                    answer_id=str(answer_id),
                    like_count=report.like_count,
                    ledger_count=report.ledger_count,
                )
            return report
