"""PostgreSQL implementation of the transaction boundary."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.repository import TransactionManager


class PostgresTransactionManager(TransactionManager):
    """Atomic units as SAVEPOINTs inside the request's session transaction.

    The outer transaction is committed or rolled back once per request by
    the session provider; a failed unit rolls back to its savepoint.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize with the request's database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        """Open a SAVEPOINT for the duration of the block."""
        async with self.session.begin_nested():
            yield
