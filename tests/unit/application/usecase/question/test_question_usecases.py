"""Unit tests for question use cases."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from qna.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionUseCase,
    GetQuestionRequest,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsUseCase,
)
from qna.domain.error import NotFoundError
from qna.domain.model import Question, Topic, User
from qna.domain.repository import QuestionRepository, TopicRepository, UserRepository
from qna.domain.value import QuestionId, TopicId, TopicName, UserId, Username
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def seed_user(unit_env) -> User:
    user_repo = await unit_env.get(UserRepository)
    return await user_repo.save(
        User(
            id=UserId(uuid4()),
            username=Username("asker"),
            email="asker@example.com",
            password_hash="unused",
        )
    )


async def seed_topics(unit_env, *names: str) -> None:
    topic_repo = await unit_env.get(TopicRepository)
    for name in names:
        await topic_repo.save(Topic(id=TopicId(uuid4()), name=TopicName(name)))


class TestCreateQuestionUseCase:
    """Tests for CreateQuestionUseCase."""

    @pytest.mark.asyncio
    async def test_create_question_with_topics(self, unit_env):
        """Question should be stored with the author's name and its topics."""
        # Arrange
        author = await seed_user(unit_env)
        await seed_topics(unit_env, "Python", "Databases")
        use_case = await unit_env.get(CreateQuestionUseCase)

        # Act
        response = await use_case.execute(
            CreateQuestionRequest(
                title="How do I paginate?",
                description="Offset or keyset?",
                topic_names=["Python", "Databases", "Python"],
                author_id=str(author.id),
            )
        )

        # Assert
        assert response.author_username.root == "asker"
        assert response.topic_names == ["Python", "Databases"]
        assert response.answer_count == 0

    @pytest.mark.asyncio
    async def test_unknown_topic_raises_value_error(self, unit_env):
        # Arrange
        author = await seed_user(unit_env)
        await seed_topics(unit_env, "Python")
        use_case = await unit_env.get(CreateQuestionUseCase)
        question_repo = await unit_env.get(QuestionRepository)

        # Act & Assert
        with pytest.raises(ValueError, match="Topics not found: Cobol"):
            await use_case.execute(
                CreateQuestionRequest(
                    title="Legacy?",
                    topic_names=["Python", "Cobol"],
                    author_id=str(author.id),
                )
            )
        assert await question_repo.count() == 0

    @pytest.mark.asyncio
    async def test_unknown_author_raises_not_found(self, unit_env):
        use_case = await unit_env.get(CreateQuestionUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateQuestionRequest(title="Orphan", author_id=str(uuid4()))
            )

    def test_more_than_five_topics_is_rejected(self):
        with pytest.raises(ValueError):
            CreateQuestionRequest(
                title="Too many",
                topic_names=["a", "b", "c", "d", "e", "f"],
                author_id=str(uuid4()),
            )


class TestListQuestionsUseCase:
    """Tests for ListQuestionsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_newest_first_with_topic_filter(self, unit_env):
        # Arrange
        author = await seed_user(unit_env)
        question_repo = await unit_env.get(QuestionRepository)
        base = datetime(2024, 1, 1)
        for minute, (title, topic) in enumerate(
            [("first", "Python"), ("second", "Rust"), ("third", "Python")]
        ):
            await question_repo.save(
                Question(
                    id=QuestionId(uuid4()),
                    title=title,
                    author_id=author.id,
                    author_username=author.username,
                    topic_names=[TopicName(topic)],
                    created_at=base + timedelta(minutes=minute),
                )
            )
        use_case = await unit_env.get(ListQuestionsUseCase)

        # Act
        response = await use_case.execute(ListQuestionsRequest(topic="Python"))

        # Assert
        assert [q.title for q in response.questions] == ["third", "first"]
        assert response.total == 2
        assert response.limit == 30


class TestGetQuestionUseCase:
    """Tests for GetQuestionUseCase."""

    @pytest.mark.asyncio
    async def test_missing_question_raises_not_found(self, unit_env):
        use_case = await unit_env.get(GetQuestionUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetQuestionRequest(question_id=str(uuid4())))

    @pytest.mark.asyncio
    async def test_malformed_id_raises_value_error(self, unit_env):
        use_case = await unit_env.get(GetQuestionUseCase)

        with pytest.raises(ValueError):
            await use_case.execute(GetQuestionRequest(question_id="nope"))
