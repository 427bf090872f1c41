"""Async engine and session factory for PostgreSQL."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from qna.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the application's async engine.

    Connections are pinged on checkout so a restarted database does not
    surface as a failed toggle.
    """
    db = settings.database
    return create_async_engine(
        db.url,
        echo=db.echo_sql,
        pool_pre_ping=True,
        pool_size=db.pool_size,
        max_overflow=db.max_overflow,
        pool_timeout=db.pool_timeout,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory used for one session per request.

    Repositories write through Core statements and flush explicitly, and
    returned models are immutable, so nothing needs expiring on commit.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
