"""Shared in-memory tables for the in-memory repositories."""

import asyncio
from typing import Any

from sqlalchemy.exc import IntegrityError

from qna.domain.model import Answer, Like, Question, Topic, User
from qna.domain.value import AnswerId, LikeId, QuestionId, TopicId, UserId


class InMemoryStore:
    """In-memory stand-in for the database, shared by all repositories.

    Repositories always read the table attributes through the store, so a
    restored snapshot is immediately visible to every repository.
    """

    _TABLES = ("users", "topics", "questions", "answers", "likes")

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.topics: dict[TopicId, Topic] = {}
        self.questions: dict[QuestionId, Question] = {}
        self.answers: dict[AnswerId, Answer] = {}
        self.likes: dict[LikeId, Like] = {}
        # Serializes atomic units, like a row lock on every row at once
        self.lock = asyncio.Lock()

    def snapshot(self) -> dict[str, dict[Any, Any]]:
        """Copy every table (models are immutable, so shallow copies suffice)."""
        return {name: dict(getattr(self, name)) for name in self._TABLES}

    def restore(self, snapshot: dict[str, dict[Any, Any]]) -> None:
        """Put every table back to a previous snapshot."""
        for name, rows in snapshot.items():
            setattr(self, name, rows)


class ConstraintViolation(Exception):
    """Driver-level error naming the violated constraint, as asyncpg's do."""

    def __init__(self, constraint_name: str) -> None:
        super().__init__(f'violates constraint "{constraint_name}"')
        self.constraint_name = constraint_name


def constraint_violation(statement: str, constraint_name: str) -> IntegrityError:
    """Build the IntegrityError SQLAlchemy would raise for a violated constraint."""
    return IntegrityError(statement, None, ConstraintViolation(constraint_name))
