"""Answer entity.

Answers are the targets of likes. ``like_count`` is a denormalized
projection of the likes ledger and is only ever moved by one in either
direction, never assigned.
"""

from datetime import datetime

from pydantic import Field

from qna.domain.model.common import DomainModel
from qna.domain.value import AnswerId, QuestionId, UserId, Username


class Answer(DomainModel):
    """Answer entity.

    Business rules:
    - like_count equals the number of likes referencing this answer
    - like_count is never negative
    """

    id: AnswerId
    question_id: QuestionId
    author_id: UserId
    author_username: Username  # Denormalized from users
    text: str = Field(min_length=1, max_length=10000)
    like_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
