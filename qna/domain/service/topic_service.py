"""Topic domain service."""

import logfire

from qna.domain.model.topic import Topic
from qna.domain.repository import TopicRepository
from qna.domain.value import TopicName

from .base import Service


class TopicService(Service):
    """Domain service for topic operations."""

    def __init__(self, topic_repository: TopicRepository) -> None:
        """Initialize topic service.

        Args:
            topic_repository: Topic repository
        """
        self.topic_repository = topic_repository

    async def validate_topics_exist(self, topic_names: list[TopicName]) -> list[Topic]:
        """Validate that all requested topics exist.

        Args:
            topic_names: List of topic names to validate

        Returns:
            List of found topics

        Raises:
            ValueError: If any topics are not found
        """
        with logfire.span(
            "topic_service.validate_topics_exist", topics=[t.root for t in topic_names]
        ):
            topics = await self.topic_repository.find_by_names(topic_names)

            found_names = {topic.name.root for topic in topics}
            requested_names = {name.root for name in topic_names}
            missing = requested_names - found_names

            if missing:
                raise ValueError(f"Topics not found: {', '.join(sorted(missing))}")

            logfire.info("All topics validated", count=len(topics))
            return topics

    async def get_all_topics(
        self, limit: int = 100, order_by: str = "name"
    ) -> list[Topic]:
        """Get all available topics.

        Args:
            limit: Maximum number of topics to return
            order_by: Field to order by ('name' or 'created_at')

        Returns:
            List of topics
        """
        with logfire.span("topic_service.get_all_topics", limit=limit, order_by=order_by):
            topics = await self.topic_repository.find_all(limit=limit, order_by=order_by)
            logfire.info("Topics retrieved", count=len(topics))
            return topics
