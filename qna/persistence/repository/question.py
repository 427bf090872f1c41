"""PostgreSQL implementation of Question repository."""

from collections import defaultdict
from typing import Optional
from uuid import UUID

from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model import Question
from qna.domain.repository import QuestionRepository
from qna.domain.value import QuestionId, TopicName
from qna.persistence.mappers import question_to_dict, row_to_question
from qna.persistence.tables import question_topics_table, questions_table, topics_table


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_topics_for_questions(
        self, question_ids: list[UUID]
    ) -> dict[UUID, list[str]]:
        """Fetch topic names for multiple questions in a single query.

        Args:
            question_ids: List of question IDs

        Returns:
            Dict mapping question_id -> list of topic names
        """
        if not question_ids:
            return {}

        stmt = (
            select(question_topics_table.c.question_id, topics_table.c.name)
            .select_from(question_topics_table)
            .join(topics_table, question_topics_table.c.topic_id == topics_table.c.id)
            .where(question_topics_table.c.question_id.in_(question_ids))
            .order_by(topics_table.c.name)
        )
        result = await self.session.execute(stmt)

        topic_map: dict[UUID, list[str]] = defaultdict(list)
        for row in result.fetchall():
            topic_map[row.question_id].append(row.name)
        return topic_map

    def _topic_filter(self, stmt, topic: Optional[TopicName]):
        if topic is None:
            return stmt
        return stmt.where(
            questions_table.c.id.in_(
                select(question_topics_table.c.question_id)
                .join(
                    topics_table, question_topics_table.c.topic_id == topics_table.c.id
                )
                .where(topics_table.c.name == topic.root)
            )
        )

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        stmt = select(questions_table).where(questions_table.c.id == question_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if not row:
            return None
        topics = await self._fetch_topics_for_questions([row.id])
        return row_to_question(row._asdict(), topics.get(row.id, []))

    async def find_all(
        self,
        topic: Optional[TopicName] = None,
        limit: int = 30,
        offset: int = 0,
    ) -> list[Question]:
        """Find questions, newest first."""
        stmt = (
            select(questions_table)
            .order_by(questions_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        stmt = self._topic_filter(stmt, topic)
        result = await self.session.execute(stmt)
        rows = result.fetchall()

        topics = await self._fetch_topics_for_questions([row.id for row in rows])
        return [row_to_question(row._asdict(), topics.get(row.id, [])) for row in rows]

    async def count(self, topic: Optional[TopicName] = None) -> int:
        """Count questions matching the given filter."""
        stmt = self._topic_filter(
            select(func.count()).select_from(questions_table), topic
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def save(self, question: Question) -> Question:
        """Save a question (create) with its topic links."""
        await self.session.execute(
            insert(questions_table).values(**question_to_dict(question))
        )

        if question.topic_names:
            topic_ids = select(topics_table.c.id).where(
                topics_table.c.name.in_([name.root for name in question.topic_names])
            )
            result = await self.session.execute(topic_ids)
            links = [
                {"question_id": question.id, "topic_id": topic_id}
                for topic_id in result.scalars().all()
            ]
            if links:
                await self.session.execute(insert(question_topics_table), links)

        await self.session.flush()
        return question

    async def increment_answer_count(self, question_id: QuestionId) -> None:
        """Atomically increment the answer count by 1."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(answer_count=questions_table.c.answer_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()
