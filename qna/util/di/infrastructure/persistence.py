"""Persistence providers.

``PersistenceProvider`` is the mockable "persistence" component; tests
swap in an in-memory implementation (see ``tests/di/persistence.py``).
"""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from qna.config import Settings
from qna.domain.repository import (
    AnswerRepository,
    LikeRepository,
    QuestionRepository,
    TopicRepository,
    TransactionManager,
    UserRepository,
)
from qna.persistence.database import create_engine, create_session_factory
from qna.persistence.repository import (
    PostgresAnswerRepository,
    PostgresLikeRepository,
    PostgresQuestionRepository,
    PostgresTopicRepository,
    PostgresTransactionManager,
    PostgresUserRepository,
)
from qna.util.di.base import ProviderBase
from qna.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Repositories and the transaction boundary."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL persistence: one engine per process, one session per request."""

    __is_mock__ = False

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """One transaction per request.

        Committed when the request scope closes normally, rolled back when
        the handler raised. A toggle that already failed has rolled back
        its own savepoint by then.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn("Request transaction rolled back", error=str(e))
                await session.rollback()
                raise
            await session.commit()

    @provide
    def get_transaction_manager(self, session: AsyncSession) -> TransactionManager:
        return PostgresTransactionManager(session)

    @provide
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        return PostgresUserRepository(session)

    @provide
    def get_topic_repository(self, session: AsyncSession) -> TopicRepository:
        return PostgresTopicRepository(session)

    @provide
    def get_question_repository(self, session: AsyncSession) -> QuestionRepository:
        return PostgresQuestionRepository(session)

    @provide
    def get_answer_repository(self, session: AsyncSession) -> AnswerRepository:
        return PostgresAnswerRepository(session)

    @provide
    def get_like_repository(self, session: AsyncSession) -> LikeRepository:
        return PostgresLikeRepository(session)
