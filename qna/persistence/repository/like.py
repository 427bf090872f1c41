"""PostgreSQL implementation of Like repository."""

from typing import List, Optional, Sequence

from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model import Like
from qna.domain.repository import LikeRepository
from qna.domain.value import AnswerId, LikeId, UserId
from qna.persistence.mappers import like_to_dict, row_to_like
from qna.persistence.tables import likes_table


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_answer(
        self, user_id: UserId, answer_id: AnswerId
    ) -> Optional[Like]:
        """Find a user's like on a specific answer."""
        stmt = select(likes_table).where(
            and_(
                likes_table.c.user_id == user_id,
                likes_table.c.answer_id == answer_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_like(row._asdict()) if row else None

    async def find_by_user_and_answers(
        self, user_id: UserId, answer_ids: Sequence[AnswerId]
    ) -> List[Like]:
        """Find a user's likes on multiple answers (batch query)."""
        if not answer_ids:
            return []

        stmt = select(likes_table).where(
            and_(
                likes_table.c.user_id == user_id,
                likes_table.c.answer_id.in_(answer_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_like(row._asdict()) for row in result.fetchall()]

    async def save(self, like: Like) -> Like:
        """Save a like (create).

        Runs in a SAVEPOINT so a unique violation only rolls back this
        insert, not the caller's transaction.
        """
        async with self.session.begin_nested():
            await self.session.execute(insert(likes_table).values(**like_to_dict(like)))
        return like

    async def delete(self, like_id: LikeId) -> bool:
        """Delete a like by ID."""
        stmt = delete(likes_table).where(likes_table.c.id == like_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def count_by_answer(self, answer_id: AnswerId) -> int:
        """Count likes on a specific answer."""
        stmt = (
            select(func.count())
            .select_from(likes_table)
            .where(likes_table.c.answer_id == answer_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def count(self) -> int:
        """Count all likes."""
        result = await self.session.execute(
            select(func.count()).select_from(likes_table)
        )
        return result.scalar_one()
