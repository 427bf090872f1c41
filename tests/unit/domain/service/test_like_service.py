"""Unit tests for LikeService."""

import asyncio
from contextlib import asynccontextmanager
from datetime import datetime
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from qna.domain.error import ConflictError, NotFoundError, StorageError, UnauthorizedError
from qna.domain.model import Answer, Like
from qna.domain.repository import UNIQUE_LIKE_CONSTRAINT, AnswerRepository, LikeRepository
from qna.domain.service import LikeService
from qna.domain.value import AnswerId, LikeId, QuestionId, UserId, Username
from qna.persistence.repository.inmemory import (
    InMemoryAnswerRepository,
    InMemoryLikeRepository,
    InMemoryStore,
    InMemoryTransactionManager,
    constraint_violation,
)
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


def make_answer(like_count: int = 0) -> Answer:
    return Answer(
        id=AnswerId(uuid4()),
        question_id=QuestionId(uuid4()),
        author_id=UserId(uuid4()),
        author_username=Username("author"),
        text="Use a context manager.",
        like_count=like_count,
        created_at=datetime.now(),
    )


async def seed_answer(unit_env, like_count: int = 0) -> Answer:
    answer_repo = await unit_env.get(AnswerRepository)
    return await answer_repo.save(make_answer(like_count))


async def seed_like(unit_env, user_id: UserId, answer: Answer) -> Like:
    """Insert a like and move the counter the way a toggle would."""
    like_repo = await unit_env.get(LikeRepository)
    answer_repo = await unit_env.get(AnswerRepository)
    like = await like_repo.save(
        Like(id=LikeId(uuid4()), user_id=user_id, answer_id=answer.id)
    )
    await answer_repo.increment_like_count(answer.id)
    return like


class StaleLookupLikeRepository(InMemoryLikeRepository):
    """Misses the caller's like on the first lookup, as if a concurrent
    toggle committed it right after the read."""

    def __init__(self, store: InMemoryStore) -> None:
        super().__init__(store)
        self.lookups = 0

    async def find_by_user_and_answer(self, user_id, answer_id):
        self.lookups += 1
        if self.lookups == 1:
            return None
        return await super().find_by_user_and_answer(user_id, answer_id)


class PhantomLikeRepository(InMemoryLikeRepository):
    """Rejects every insert as a duplicate but never finds the like."""

    async def find_by_user_and_answer(self, user_id, answer_id):
        return None

    async def save(self, like):
        raise constraint_violation("INSERT INTO likes", UNIQUE_LIKE_CONSTRAINT)


class MissingUserLikeRepository(InMemoryLikeRepository):
    """Rejects every insert on the user foreign key, as for a deleted account."""

    async def save(self, like):
        raise constraint_violation("INSERT INTO likes", "likes_user_id_fkey")


class VanishingLikeRepository(InMemoryLikeRepository):
    """Finds the like but loses the delete to someone else."""

    async def delete(self, like_id):
        return False


class FailingCounterAnswerRepository(InMemoryAnswerRepository):
    """Counter updates fail as if the connection dropped."""

    async def increment_like_count(self, answer_id):
        raise OperationalError("UPDATE answers", {}, Exception("connection lost"))


class YieldingLikeRepository(InMemoryLikeRepository):
    """Yields to the event loop between lookup and write.

    Records each call so tests can see whether toggles interleaved.
    """

    def __init__(self, store: InMemoryStore) -> None:
        super().__init__(store)
        self.calls: list[tuple[str, UserId]] = []

    async def find_by_user_and_answer(self, user_id, answer_id):
        self.calls.append(("find", user_id))
        result = await super().find_by_user_and_answer(user_id, answer_id)
        await asyncio.sleep(0)
        return result

    async def save(self, like):
        await asyncio.sleep(0)
        self.calls.append(("save", like.user_id))
        return await super().save(like)

    async def delete(self, like_id):
        like = self._store.likes.get(like_id)
        await asyncio.sleep(0)
        if like:
            self.calls.append(("delete", like.user_id))
        return await super().delete(like_id)


class UnlockedTransactionManager(InMemoryTransactionManager):
    """Units that never take the store lock."""

    @asynccontextmanager
    async def atomic(self):
        yield


async def build_like_service(
    unit_env,
    like_repository_class=InMemoryLikeRepository,
    answer_repository_class=InMemoryAnswerRepository,
    transaction_manager_class=InMemoryTransactionManager,
) -> tuple[LikeService, InMemoryStore]:
    store = await unit_env.get(InMemoryStore)
    service = LikeService(
        like_repository=like_repository_class(store),
        answer_repository=answer_repository_class(store),
        transaction_manager=transaction_manager_class(store),
    )
    return service, store


class TestToggleLike:
    """Tests for toggle_like method."""

    @pytest.mark.asyncio
    async def test_first_toggle_likes_answer(self, unit_env):
        """First toggle should create a like and bump the count to 1."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        like_repo = await unit_env.get(LikeRepository)
        answer = await seed_answer(unit_env)
        user_id = UserId(uuid4())

        # Act
        result = await like_service.toggle_like(answer.id, user_id)

        # Assert
        assert result.liked is True
        assert result.like_count == 1
        like = await like_repo.find_by_user_and_answer(user_id, answer.id)
        assert like is not None
        assert like.user_id == user_id

    @pytest.mark.asyncio
    async def test_second_toggle_unlikes_answer(self, unit_env):
        """Toggling again should remove the like and return the count to 0."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        like_repo = await unit_env.get(LikeRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        answer = await seed_answer(unit_env)
        user_id = UserId(uuid4())
        await like_service.toggle_like(answer.id, user_id)

        # Act
        result = await like_service.toggle_like(answer.id, user_id)

        # Assert
        assert result.liked is False
        assert result.like_count == 0
        assert await like_repo.find_by_user_and_answer(user_id, answer.id) is None
        assert (await answer_repo.find_by_id(answer.id)).like_count == 0

    @pytest.mark.asyncio
    async def test_second_user_adds_to_existing_likes(self, unit_env):
        """A different user's like should stack on top of the first."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        answer = await seed_answer(unit_env)
        await like_service.toggle_like(answer.id, UserId(uuid4()))

        # Act
        result = await like_service.toggle_like(answer.id, UserId(uuid4()))

        # Assert
        assert result.liked is True
        assert result.like_count == 2

    @pytest.mark.asyncio
    async def test_unlike_leaves_other_users_likes(self, unit_env):
        """Unliking should only remove the caller's like."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        like_repo = await unit_env.get(LikeRepository)
        answer = await seed_answer(unit_env)
        alice, bob = UserId(uuid4()), UserId(uuid4())
        await like_service.toggle_like(answer.id, alice)
        await like_service.toggle_like(answer.id, bob)

        # Act
        result = await like_service.toggle_like(answer.id, alice)

        # Assert
        assert result.liked is False
        assert result.like_count == 1
        assert await like_repo.find_by_user_and_answer(bob, answer.id) is not None

    @pytest.mark.asyncio
    async def test_toggle_without_user_raises_unauthorized(self, unit_env):
        """Anonymous toggles should fail without touching anything."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        like_repo = await unit_env.get(LikeRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        answer = await seed_answer(unit_env)

        # Act & Assert
        with pytest.raises(UnauthorizedError):
            await like_service.toggle_like(answer.id, None)

        assert await like_repo.count() == 0
        assert (await answer_repo.find_by_id(answer.id)).like_count == 0

    @pytest.mark.asyncio
    async def test_toggle_unknown_answer_raises_not_found(self, unit_env):
        """Toggling a missing answer should fail and create no like."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        like_repo = await unit_env.get(LikeRepository)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Answer not found"):
            await like_service.toggle_like(AnswerId(uuid4()), UserId(uuid4()))

        assert await like_repo.count() == 0

    @pytest.mark.asyncio
    async def test_repeated_toggles_alternate(self, unit_env):
        """N toggles by one user should alternate liked and never go negative."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        answer = await seed_answer(unit_env)
        user_id = UserId(uuid4())

        # Act
        results = [await like_service.toggle_like(answer.id, user_id) for _ in range(7)]

        # Assert
        assert [r.liked for r in results] == [True, False, True, False, True, False, True]
        assert [r.like_count for r in results] == [1, 0, 1, 0, 1, 0, 1]

    @pytest.mark.asyncio
    async def test_count_matches_ledger_after_mixed_toggles(self, unit_env):
        """like_count should equal the number of likes after any sequence."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        answer = await seed_answer(unit_env)
        users = [UserId(uuid4()) for _ in range(4)]

        # Act
        for user_id in users + users[:2] + users[:1]:
            await like_service.toggle_like(answer.id, user_id)

        # Assert
        report = await like_service.check_like_count(answer.id)
        assert report.consistent
        assert report.like_count == 3


class TestToggleLikeConcurrency:
    """Tests for concurrent toggles.

    The yielding repository hands control back to the event loop inside
    every unit, so gathered toggles really do overlap unless the
    transaction holds them apart.
    """

    @pytest.mark.asyncio
    async def test_unlocked_units_interleave(self, unit_env):
        """Without the store lock two toggles would both read before writing."""
        # Arrange
        like_service, _ = await build_like_service(
            unit_env,
            like_repository_class=YieldingLikeRepository,
            transaction_manager_class=UnlockedTransactionManager,
        )
        answer = await seed_answer(unit_env)
        alice, bob = UserId(uuid4()), UserId(uuid4())

        # Act
        await asyncio.gather(
            like_service.toggle_like(answer.id, alice),
            like_service.toggle_like(answer.id, bob),
        )

        # Assert
        calls = like_service.like_repository.calls
        assert calls[:2] == [("find", alice), ("find", bob)]

    @pytest.mark.asyncio
    async def test_concurrent_toggles_by_different_users_commute(self, unit_env):
        """Concurrent likes from distinct users should all count."""
        # Arrange
        like_service, _ = await build_like_service(
            unit_env, like_repository_class=YieldingLikeRepository
        )
        like_repo = await unit_env.get(LikeRepository)
        answer = await seed_answer(unit_env)
        users = [UserId(uuid4()) for _ in range(10)]

        # Act
        results = await asyncio.gather(
            *(like_service.toggle_like(answer.id, user_id) for user_id in users)
        )

        # Assert
        assert all(r.liked for r in results)
        assert sorted(r.like_count for r in results) == list(range(1, 11))
        assert await like_repo.count_by_answer(answer.id) == 10
        # Each unit finished its read and write before the next one started
        calls = like_service.like_repository.calls
        assert calls == [
            (step, user_id) for user_id in users for step in ("find", "save")
        ]

    @pytest.mark.asyncio
    async def test_concurrent_toggles_by_same_user_serialize(self, unit_env):
        """Two racing toggles by one user should like then unlike."""
        # Arrange
        like_service, _ = await build_like_service(
            unit_env, like_repository_class=YieldingLikeRepository
        )
        like_repo = await unit_env.get(LikeRepository)
        answer = await seed_answer(unit_env)
        user_id = UserId(uuid4())

        # Act
        results = await asyncio.gather(
            like_service.toggle_like(answer.id, user_id),
            like_service.toggle_like(answer.id, user_id),
        )

        # Assert - never two likes for the same pair
        assert [(r.liked, r.like_count) for r in results] == [(True, 1), (False, 0)]
        assert like_service.like_repository.calls == [
            ("find", user_id),
            ("save", user_id),
            ("find", user_id),
            ("delete", user_id),
        ]
        assert await like_repo.count_by_answer(answer.id) == 0
        report = await like_service.check_like_count(answer.id)
        assert report.consistent

    @pytest.mark.asyncio
    async def test_many_concurrent_toggles_by_same_user_never_duplicate(
        self, unit_env
    ):
        """An odd number of racing toggles should end with exactly one like."""
        # Arrange
        like_service, store = await build_like_service(
            unit_env, like_repository_class=YieldingLikeRepository
        )
        answer = await seed_answer(unit_env)
        user_id = UserId(uuid4())

        # Act
        results = await asyncio.gather(
            *(like_service.toggle_like(answer.id, user_id) for _ in range(7))
        )

        # Assert
        assert [r.liked for r in results] == [True, False, True, False, True, False, True]
        assert len(store.likes) == 1
        assert store.answers[answer.id].like_count == 1


class TestToggleLikeFailures:
    """Tests for the duplicate-insert fallback and failure rollback."""

    @pytest.mark.asyncio
    async def test_duplicate_insert_falls_back_to_unlike(self, unit_env):
        """A like committed after our lookup should be removed instead."""
        # Arrange
        like_service, store = await build_like_service(
            unit_env, like_repository_class=StaleLookupLikeRepository
        )
        answer = await seed_answer(unit_env)
        user_id = UserId(uuid4())
        await seed_like(unit_env, user_id, answer)

        # Act
        result = await like_service.toggle_like(answer.id, user_id)

        # Assert
        assert result.liked is False
        assert result.like_count == 0
        assert store.likes == {}

    @pytest.mark.asyncio
    async def test_unresolvable_duplicate_raises_conflict_and_rolls_back(
        self, unit_env
    ):
        """A duplicate that cannot be found again should abort the toggle."""
        # Arrange
        like_service, store = await build_like_service(
            unit_env, like_repository_class=PhantomLikeRepository
        )
        answer = await seed_answer(unit_env)

        # Act & Assert
        with pytest.raises(ConflictError):
            await like_service.toggle_like(answer.id, UserId(uuid4()))

        assert store.answers[answer.id].like_count == 0
        assert store.likes == {}

    @pytest.mark.asyncio
    async def test_lost_delete_raises_conflict_and_rolls_back(self, unit_env):
        """A like deleted underneath us should abort without moving the count."""
        # Arrange
        like_service, store = await build_like_service(
            unit_env, like_repository_class=VanishingLikeRepository
        )
        answer = await seed_answer(unit_env)
        user_id = UserId(uuid4())
        await seed_like(unit_env, user_id, answer)

        # Act & Assert
        with pytest.raises(ConflictError):
            await like_service.toggle_like(answer.id, user_id)

        assert store.answers[answer.id].like_count == 1
        assert len(store.likes) == 1

    @pytest.mark.asyncio
    async def test_storage_fault_raises_storage_error_and_rolls_back(self, unit_env):
        """A counter failure should undo the inserted like."""
        # Arrange
        like_service, store = await build_like_service(
            unit_env, answer_repository_class=FailingCounterAnswerRepository
        )
        answer = await seed_answer(unit_env)

        # Act & Assert
        with pytest.raises(StorageError) as exc_info:
            await like_service.toggle_like(answer.id, UserId(uuid4()))

        assert isinstance(exc_info.value.__cause__, OperationalError)
        assert store.likes == {}
        assert store.answers[answer.id].like_count == 0

    @pytest.mark.asyncio
    async def test_missing_user_row_raises_storage_error_and_rolls_back(
        self, unit_env
    ):
        """A foreign key failure is a storage fault, not a racing toggle."""
        # Arrange
        like_service, store = await build_like_service(
            unit_env, like_repository_class=MissingUserLikeRepository
        )
        answer = await seed_answer(unit_env)

        # Act & Assert
        with pytest.raises(StorageError) as exc_info:
            await like_service.toggle_like(answer.id, UserId(uuid4()))

        assert isinstance(exc_info.value.__cause__, IntegrityError)
        assert store.likes == {}
        assert store.answers[answer.id].like_count == 0


class TestGetUserLikesForAnswers:
    """Tests for get_user_likes_for_answers method."""

    @pytest.mark.asyncio
    async def test_maps_each_answer_to_like_state(self, unit_env):
        """Should report true only for answers the user likes."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        liked = await seed_answer(unit_env)
        not_liked = await seed_answer(unit_env)
        user_id = UserId(uuid4())
        await like_service.toggle_like(liked.id, user_id)
        await like_service.toggle_like(not_liked.id, UserId(uuid4()))

        # Act
        result = await like_service.get_user_likes_for_answers(
            user_id, [liked.id, not_liked.id]
        )

        # Assert
        assert result == {liked.id: True, not_liked.id: False}

    @pytest.mark.asyncio
    async def test_empty_answer_list_returns_empty(self, unit_env):
        """Should return empty dict for no answers."""
        like_service = await unit_env.get(LikeService)

        assert await like_service.get_user_likes_for_answers(UserId(uuid4()), []) == {}


class TestCheckLikeCount:
    """Tests for check_like_count method."""

    @pytest.mark.asyncio
    async def test_reports_drift_without_repairing(self, unit_env):
        """A counter out of step with the ledger should be reported as is."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        answer_repo = await unit_env.get(AnswerRepository)
        answer = await seed_answer(unit_env, like_count=3)

        # Act
        report = await like_service.check_like_count(answer.id)

        # Assert
        assert not report.consistent
        assert report.like_count == 3
        assert report.ledger_count == 0
        assert (await answer_repo.find_by_id(answer.id)).like_count == 3

    @pytest.mark.asyncio
    async def test_unknown_answer_raises_not_found(self, unit_env):
        """Checking a missing answer should raise NotFoundError."""
        like_service = await unit_env.get(LikeService)

        with pytest.raises(NotFoundError):
            await like_service.check_like_count(AnswerId(uuid4()))
