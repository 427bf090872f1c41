"""Domain value objects for the Q&A board."""

from qna.domain.value.identifiers import (
    AnswerId,
    LikeId,
    QuestionId,
    TopicId,
    UserId,
)
from qna.domain.value.types import TopicName, Username

__all__ = [
    # Identifiers
    "UserId",
    "TopicId",
    "QuestionId",
    "AnswerId",
    "LikeId",
    # Types
    "Username",
    "TopicName",
]
