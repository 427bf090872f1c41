"""Unit tests for ToggleLikeUseCase."""

from datetime import datetime
from uuid import uuid4

import pytest

from qna.application.usecase.like import ToggleLikeRequest, ToggleLikeUseCase
from qna.domain.error import NotFoundError, UnauthorizedError
from qna.domain.model import Answer
from qna.domain.repository import AnswerRepository, LikeRepository
from qna.domain.value import AnswerId, QuestionId, UserId, Username
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def seed_answer(unit_env) -> Answer:
    answer_repo = await unit_env.get(AnswerRepository)
    return await answer_repo.save(
        Answer(
            id=AnswerId(uuid4()),
            question_id=QuestionId(uuid4()),
            author_id=UserId(uuid4()),
            author_username=Username("author"),
            text="Try a generator.",
            created_at=datetime.now(),
        )
    )


class TestToggleLikeUseCase:
    """Tests for ToggleLikeUseCase."""

    @pytest.mark.asyncio
    async def test_toggle_like_then_unlike(self, unit_env):
        """Two toggles should report liked then unliked."""
        # Arrange
        use_case = await unit_env.get(ToggleLikeUseCase)
        answer = await seed_answer(unit_env)
        request = ToggleLikeRequest(answer_id=str(answer.id), user_id=str(uuid4()))

        # Act
        first = await use_case.execute(request)
        second = await use_case.execute(request)

        # Assert
        assert (first.liked, first.like_count) == (True, 1)
        assert (second.liked, second.like_count) == (False, 0)
        assert first.answer_id == str(answer.id)

    @pytest.mark.asyncio
    async def test_anonymous_request_raises_unauthorized(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ToggleLikeUseCase)
        like_repo = await unit_env.get(LikeRepository)
        answer = await seed_answer(unit_env)

        # Act & Assert
        with pytest.raises(UnauthorizedError):
            await use_case.execute(ToggleLikeRequest(answer_id=str(answer.id)))

        assert await like_repo.count() == 0

    @pytest.mark.asyncio
    async def test_unknown_answer_raises_not_found(self, unit_env):
        use_case = await unit_env.get(ToggleLikeUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                ToggleLikeRequest(answer_id=str(uuid4()), user_id=str(uuid4()))
            )

    @pytest.mark.asyncio
    async def test_malformed_answer_id_raises_value_error(self, unit_env):
        use_case = await unit_env.get(ToggleLikeUseCase)

        with pytest.raises(ValueError):
            await use_case.execute(
                ToggleLikeRequest(answer_id="not-a-uuid", user_id=str(uuid4()))
            )

    @pytest.mark.asyncio
    async def test_anonymous_request_with_malformed_id_raises_unauthorized(
        self, unit_env
    ):
        """Missing identity should win over a bad answer id."""
        use_case = await unit_env.get(ToggleLikeUseCase)

        with pytest.raises(UnauthorizedError):
            await use_case.execute(ToggleLikeRequest(answer_id="not-a-uuid"))
