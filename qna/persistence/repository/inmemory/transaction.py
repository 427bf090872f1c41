"""In-memory transaction manager for testing."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from qna.domain.repository import TransactionManager

from .store import InMemoryStore


class InMemoryTransactionManager(TransactionManager):
    """Atomic units over the in-memory store.

    Units are serialized by the store lock and roll back to a snapshot
    taken on entry if the block raises. Units do not nest.
    """

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        """Run the block under the store lock with snapshot rollback."""
        async with self.store.lock:
            snapshot = self.store.snapshot()
            try:
                yield
            except BaseException:
                self.store.restore(snapshot)
                raise
