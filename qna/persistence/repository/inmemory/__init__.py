"""In-memory repository implementations for testing."""

from .answer import InMemoryAnswerRepository
from .like import InMemoryLikeRepository
from .question import InMemoryQuestionRepository
from .store import ConstraintViolation, InMemoryStore, constraint_violation
from .topic import InMemoryTopicRepository
from .transaction import InMemoryTransactionManager
from .user import InMemoryUserRepository

__all__ = [
    "ConstraintViolation",
    "InMemoryAnswerRepository",
    "InMemoryLikeRepository",
    "InMemoryQuestionRepository",
    "InMemoryStore",
    "InMemoryTopicRepository",
    "InMemoryTransactionManager",
    "InMemoryUserRepository",
    "constraint_violation",
]
