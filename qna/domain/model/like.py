"""Like entity.

A like records that a user currently likes an answer. Likes are created
and destroyed by toggling; they are never updated.
"""

from datetime import datetime

from pydantic import Field

from qna.domain.model.common import DomainModel
from qna.domain.value import AnswerId, LikeId, UserId


class Like(DomainModel):
    """Like entity.

    Business rules:
    - One like per user per answer (enforced by database unique constraint)
    - Immutable between creation and deletion
    """

    id: LikeId
    user_id: UserId
    answer_id: AnswerId
    created_at: datetime = Field(default_factory=datetime.now)
