"""Repository interfaces for the Q&A board domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from qna.domain.repository.answer import AnswerRepository
from qna.domain.repository.like import UNIQUE_LIKE_CONSTRAINT, LikeRepository
from qna.domain.repository.question import QuestionRepository
from qna.domain.repository.topic import TopicRepository
from qna.domain.repository.transaction import TransactionManager
from qna.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "TopicRepository",
    "QuestionRepository",
    "AnswerRepository",
    "LikeRepository",
    "TransactionManager",
    "UNIQUE_LIKE_CONSTRAINT",
]
