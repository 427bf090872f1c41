"""Topic repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from qna.domain.model.topic import Topic
from qna.domain.value import TopicName


class TopicRepository(ABC):
    """Repository for Topic entity."""

    @abstractmethod
    async def save(self, topic: Topic) -> Topic:
        """Save a topic.

        Args:
            topic: Topic to save

        Returns:
            Saved topic
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: TopicName) -> Optional[Topic]:
        """Find topic by name.

        Args:
            name: Topic name

        Returns:
            Topic if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_names(self, names: list[TopicName]) -> list[Topic]:
        """Find multiple topics by names in a single query.

        Args:
            names: List of topic names

        Returns:
            List of found topics (may be shorter than input if some not found)
        """
        pass

    @abstractmethod
    async def find_all(self, limit: int = 100, order_by: str = "name") -> list[Topic]:
        """Find all topics.

        Args:
            limit: Maximum number of topics to return
            order_by: Field to order by ('name' or 'created_at')

        Returns:
            List of topics
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all topics.

        Returns:
            Number of topics
        """
        pass
