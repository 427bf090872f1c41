"""PostgreSQL repository implementations."""

from qna.persistence.repository.answer import PostgresAnswerRepository
from qna.persistence.repository.like import PostgresLikeRepository
from qna.persistence.repository.question import PostgresQuestionRepository
from qna.persistence.repository.topic import PostgresTopicRepository
from qna.persistence.repository.transaction import PostgresTransactionManager
from qna.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresTopicRepository",
    "PostgresQuestionRepository",
    "PostgresAnswerRepository",
    "PostgresLikeRepository",
    "PostgresTransactionManager",
]
