"""Topic entity for categorizing questions."""

from datetime import datetime

from pydantic import Field

from qna.domain.model.common import DomainModel
from qna.domain.value import TopicId, TopicName


class Topic(DomainModel):
    """Topic entity.

    Topics are seeded by migration and referenced by name from questions.
    """

    id: TopicId
    name: TopicName
    created_at: datetime = Field(default_factory=datetime.now)
