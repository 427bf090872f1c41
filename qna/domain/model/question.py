"""Question aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from qna.domain.model.common import DomainModel
from qna.domain.value import QuestionId, TopicName, UserId, Username


class Question(DomainModel):
    """Question aggregate root.

    A question carries up to five topics and a denormalized answer count.
    """

    id: QuestionId
    title: str = Field(min_length=1, max_length=300)
    description: Optional[str] = Field(default=None, max_length=10000)
    author_id: UserId
    author_username: Username  # Denormalized from users
    topic_names: list[TopicName] = Field(default_factory=list, max_length=5)
    answer_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
