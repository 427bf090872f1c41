"""In-memory topic repository for testing."""

from typing import Optional

from qna.domain.model.topic import Topic
from qna.domain.repository import TopicRepository
from qna.domain.value import TopicName

from .store import InMemoryStore


class InMemoryTopicRepository(TopicRepository):
    """In-memory implementation of TopicRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def save(self, topic: Topic) -> Topic:
        """Save a topic."""
        self._store.topics[topic.id] = topic
        return topic

    async def find_by_name(self, name: TopicName) -> Optional[Topic]:
        """Find topic by name."""
        for topic in self._store.topics.values():
            if topic.name == name:
                return topic
        return None

    async def find_by_names(self, names: list[TopicName]) -> list[Topic]:
        """Find multiple topics by names."""
        wanted = {name.root for name in names}
        return [t for t in self._store.topics.values() if t.name.root in wanted]

    async def find_all(self, limit: int = 100, order_by: str = "name") -> list[Topic]:
        """Find all topics."""
        topics = list(self._store.topics.values())
        if order_by == "created_at":
            topics.sort(key=lambda t: t.created_at, reverse=True)
        else:
            topics.sort(key=lambda t: t.name.root)
        return topics[:limit]

    async def count(self) -> int:
        """Count all topics."""
        return len(self._store.topics)
