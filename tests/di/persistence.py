"""Mock persistence providers for testing."""

from dishka import Scope, provide

from qna.domain.repository import (
    AnswerRepository,
    LikeRepository,
    QuestionRepository,
    TopicRepository,
    TransactionManager,
    UserRepository,
)
from qna.persistence.repository.inmemory import (
    InMemoryAnswerRepository,
    InMemoryLikeRepository,
    InMemoryQuestionRepository,
    InMemoryStore,
    InMemoryTopicRepository,
    InMemoryTransactionManager,
    InMemoryUserRepository,
)
from qna.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The store is APP-scoped, so every request in one container sees the
    same data; each test builds its own container for isolation.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        """Provide the shared in-memory store."""
        return InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_transaction_manager(self, store: InMemoryStore) -> TransactionManager:
        """Provide in-memory transaction manager."""
        return InMemoryTransactionManager(store)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, store: InMemoryStore) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_topic_repository(self, store: InMemoryStore) -> TopicRepository:
        """Provide in-memory topic repository."""
        return InMemoryTopicRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_question_repository(self, store: InMemoryStore) -> QuestionRepository:
        """Provide in-memory question repository."""
        return InMemoryQuestionRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_answer_repository(self, store: InMemoryStore) -> AnswerRepository:
        """Provide in-memory answer repository."""
        return InMemoryAnswerRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_like_repository(self, store: InMemoryStore) -> LikeRepository:
        """Provide in-memory like repository."""
        return InMemoryLikeRepository(store)
