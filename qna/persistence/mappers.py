"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from qna.domain.model import Answer, Like, Question, Topic, User
from qna.domain.value import (
    AnswerId,
    LikeId,
    QuestionId,
    TopicId,
    TopicName,
    UserId,
    Username,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        email=row["email"],
        password_hash=row["password_hash"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_topic(row: Dict[str, Any]) -> Topic:
    """Convert database row to Topic domain model."""
    return Topic(
        id=TopicId(_uuid(row["id"])),
        name=TopicName(row["name"]),
        created_at=row["created_at"],
    )


def topic_to_dict(topic: Topic) -> Dict[str, Any]:
    """Convert Topic domain model to database dict."""
    return topic.model_dump()


def row_to_question(row: Dict[str, Any], topic_names: list[str]) -> Question:
    """Convert database row to Question domain model.

    Args:
        row: Database row as dict
        topic_names: Names of the question's topics (from the junction table)

    Returns:
        Question domain model
    """
    return Question(
        id=QuestionId(_uuid(row["id"])),
        title=row["title"],
        description=row.get("description"),
        author_id=UserId(_uuid(row["author_id"])),
        author_username=Username(row["author_username"]),
        topic_names=[TopicName(name) for name in topic_names],
        answer_count=row["answer_count"],
        created_at=row["created_at"],
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to a questions row.

    Topic names live in the junction table and are excluded.
    """
    return question.model_dump(exclude={"topic_names"})


def row_to_answer(row: Dict[str, Any]) -> Answer:
    """Convert database row to Answer domain model."""
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        author_username=Username(row["author_username"]),
        text=row["text"],
        like_count=row["like_count"],
        created_at=row["created_at"],
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    """Convert Answer domain model to database dict."""
    return answer.model_dump()


def row_to_like(row: Dict[str, Any]) -> Like:
    """Convert database row to Like domain model."""
    return Like(
        id=LikeId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        answer_id=AnswerId(_uuid(row["answer_id"])),
        created_at=row["created_at"],
    )


def like_to_dict(like: Like) -> Dict[str, Any]:
    """Convert Like domain model to database dict."""
    return like.model_dump()
