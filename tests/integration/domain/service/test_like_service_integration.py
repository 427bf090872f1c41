"""Integration tests for LikeService against PostgreSQL."""

import asyncio
from uuid import uuid4

import pytest

from qna.domain.error import StorageError
from qna.domain.repository import AnswerRepository
from qna.domain.service import LikeService
from qna.domain.value import UserId
from tests.di import build_test_container
from tests.integration.factories import create_answer, create_user


class TestToggleLikeIntegration:
    """Toggles in separate sessions, as separate requests would run them."""

    @pytest.mark.asyncio
    async def test_concurrent_toggles_by_different_users_all_count(self):
        """Row locks serialize the counter so no like is lost."""
        # Arrange
        container = build_test_container(unmock={"persistence"})
        async with container() as setup:
            answer = await create_answer(setup)
            users = [await create_user(setup) for _ in range(5)]

        async def toggle(user_id):
            async with container() as request_container:
                like_service = await request_container.get(LikeService)
                return await like_service.toggle_like(answer.id, user_id)

        # Act
        results = await asyncio.gather(*(toggle(user.id) for user in users))

        # Assert
        assert all(result.liked for result in results)
        assert sorted(result.like_count for result in results) == [1, 2, 3, 4, 5]
        async with container() as check:
            answer_repo = await check.get(AnswerRepository)
            stored = await answer_repo.find_by_id(answer.id)
            like_service = await check.get(LikeService)
            report = await like_service.check_like_count(answer.id)
        assert stored is not None
        assert stored.like_count == 5
        assert report.consistent

        await container.close()

    @pytest.mark.asyncio
    async def test_concurrent_toggles_by_same_user_stay_consistent(self):
        """Two racing toggles by one user must leave ledger and counter equal."""
        # Arrange
        container = build_test_container(unmock={"persistence"})
        async with container() as setup:
            answer = await create_answer(setup)
            user = await create_user(setup)

        async def toggle():
            async with container() as request_container:
                like_service = await request_container.get(LikeService)
                return await like_service.toggle_like(answer.id, user.id)

        # Act
        results = await asyncio.gather(toggle(), toggle())

        # Assert
        assert sorted(result.liked for result in results) == [False, True]
        async with container() as check:
            like_service = await check.get(LikeService)
            report = await like_service.check_like_count(answer.id)
        assert report.consistent
        assert report.like_count == 0

        await container.close()

    @pytest.mark.asyncio
    async def test_toggle_by_unknown_user_raises_storage_error(self):
        """A user id with no row fails the foreign key and leaves the count alone."""
        # Arrange
        container = build_test_container(unmock={"persistence"})
        async with container() as setup:
            answer = await create_answer(setup)

        # Act & Assert
        with pytest.raises(StorageError):
            async with container() as request_container:
                like_service = await request_container.get(LikeService)
                await like_service.toggle_like(answer.id, UserId(uuid4()))

        async with container() as check:
            like_service = await check.get(LikeService)
            report = await like_service.check_like_count(answer.id)
        assert report.consistent
        assert report.like_count == 0

        await container.close()
