"""Domain layer DI providers."""

from dishka import Scope, provide

from qna.config import AuthSettings
from qna.domain.repository import (
    AnswerRepository,
    LikeRepository,
    QuestionRepository,
    TopicRepository,
    TransactionManager,
    UserRepository,
)
from qna.domain.service import (
    AnswerService,
    JWTService,
    LikeService,
    PasswordService,
    QuestionService,
    TopicService,
    UserService,
)
from qna.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances sharing one session.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_password_service(self) -> PasswordService:
        """Provide password hashing domain service."""
        return PasswordService()

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_topic_service(self, topic_repository: TopicRepository) -> TopicService:
        """Provide topic domain service."""
        return TopicService(topic_repository=topic_repository)

    @provide
    def get_question_service(
        self, question_repository: QuestionRepository
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(question_repository=question_repository)

    @provide
    def get_answer_service(self, answer_repository: AnswerRepository) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(answer_repository=answer_repository)

    @provide
    def get_like_service(
        self,
        like_repository: LikeRepository,
        answer_repository: AnswerRepository,
        transaction_manager: TransactionManager,
    ) -> LikeService:
        """Provide like domain service.

        The ledger and counter repositories must share the transaction
        manager's session so a toggle commits or rolls back as one unit.
        """
        return LikeService(
            like_repository=like_repository,
            answer_repository=answer_repository,
            transaction_manager=transaction_manager,
        )
