"""Transaction boundary interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class TransactionManager(ABC):
    """Groups repository writes into one all-or-nothing unit.

    Usage:
        async with transaction_manager.atomic():
            await like_repository.save(like)
            await answer_repository.increment_like_count(answer_id)

    If the block raises, every write made inside it is rolled back and the
    exception propagates.
    """

    @abstractmethod
    def atomic(self) -> AbstractAsyncContextManager[None]:
        """Open an atomic unit of work."""
        pass
