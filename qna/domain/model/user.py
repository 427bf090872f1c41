"""User aggregate root."""

from datetime import datetime

from pydantic import Field

from qna.domain.model.common import DomainModel
from qna.domain.value import UserId, Username


class User(DomainModel):
    """User aggregate root.

    Users register with email and password. The user id is the voter
    identity used by the likes ledger.
    """

    id: UserId
    username: Username
    email: str = Field(min_length=3, max_length=255)
    password_hash: str
    created_at: datetime = Field(default_factory=datetime.now)
