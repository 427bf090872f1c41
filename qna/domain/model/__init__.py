"""Domain model entities for the Q&A board."""

from qna.domain.model.answer import Answer
from qna.domain.model.like import Like
from qna.domain.model.question import Question
from qna.domain.model.topic import Topic
from qna.domain.model.user import User

__all__ = [
    "User",
    "Topic",
    "Question",
    "Answer",
    "Like",
]
