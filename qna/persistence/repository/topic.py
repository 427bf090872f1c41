"""PostgreSQL implementation of Topic repository."""

from typing import Optional

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model.topic import Topic
from qna.domain.repository import TopicRepository
from qna.domain.value import TopicName
from qna.persistence.mappers import row_to_topic, topic_to_dict
from qna.persistence.tables import topics_table


class PostgresTopicRepository(TopicRepository):
    """PostgreSQL implementation of TopicRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def save(self, topic: Topic) -> Topic:
        """Save a topic."""
        await self.session.execute(insert(topics_table).values(**topic_to_dict(topic)))
        await self.session.flush()
        return topic

    async def find_by_name(self, name: TopicName) -> Optional[Topic]:
        """Find topic by name."""
        stmt = select(topics_table).where(topics_table.c.name == name.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_topic(row._asdict()) if row else None

    async def find_by_names(self, names: list[TopicName]) -> list[Topic]:
        """Find multiple topics by names in a single query."""
        if not names:
            return []

        stmt = select(topics_table).where(
            topics_table.c.name.in_([name.root for name in names])
        )
        result = await self.session.execute(stmt)
        return [row_to_topic(row._asdict()) for row in result.fetchall()]

    async def find_all(self, limit: int = 100, order_by: str = "name") -> list[Topic]:
        """Find all topics."""
        stmt = select(topics_table).limit(limit)

        if order_by == "created_at":
            stmt = stmt.order_by(topics_table.c.created_at.desc())
        else:
            stmt = stmt.order_by(topics_table.c.name)

        result = await self.session.execute(stmt)
        return [row_to_topic(row._asdict()) for row in result.fetchall()]

    async def count(self) -> int:
        """Count all topics."""
        result = await self.session.execute(
            select(func.count()).select_from(topics_table)
        )
        return result.scalar_one()
