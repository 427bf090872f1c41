"""PostgreSQL implementation of Answer repository."""

from typing import Optional

from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model import Answer
from qna.domain.repository import AnswerRepository
from qna.domain.value import AnswerId, QuestionId
from qna.persistence.mappers import answer_to_dict, row_to_answer
from qna.persistence.tables import answers_table


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        stmt = select(answers_table).where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_answer(row._asdict()) if row else None

    async def lock_for_update(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer with SELECT ... FOR UPDATE."""
        stmt = (
            select(answers_table)
            .where(answers_table.c.id == answer_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_answer(row._asdict()) if row else None

    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        """Find all answers for a question, oldest first."""
        stmt = (
            select(answers_table)
            .where(answers_table.c.question_id == question_id)
            .order_by(answers_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_answer(row._asdict()) for row in result.fetchall()]

    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create)."""
        await self.session.execute(insert(answers_table).values(**answer_to_dict(answer)))
        await self.session.flush()
        return answer

    async def increment_like_count(self, answer_id: AnswerId) -> Optional[int]:
        """Atomically increment like_count by 1."""
        stmt = (
            update(answers_table)
            .where(answers_table.c.id == answer_id)
            .values(like_count=answers_table.c.like_count + 1)
            .returning(answers_table.c.like_count)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def decrement_like_count(self, answer_id: AnswerId) -> Optional[int]:
        """Atomically decrement like_count by 1.

        The like_count_non_negative check constraint rejects a decrement
        below zero instead of clamping it.
        """
        stmt = (
            update(answers_table)
            .where(answers_table.c.id == answer_id)
            .values(like_count=answers_table.c.like_count - 1)
            .returning(answers_table.c.like_count)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def count(self) -> int:
        """Count all answers."""
        result = await self.session.execute(
            select(func.count()).select_from(answers_table)
        )
        return result.scalar_one()
