"""Application layer DI providers."""

from dishka import Scope, provide

from qna.application.usecase.answer import CreateAnswerUseCase, ListAnswersUseCase
from qna.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from qna.application.usecase.like import ToggleLikeUseCase
from qna.application.usecase.question import (
    CreateQuestionUseCase,
    GetQuestionUseCase,
    ListQuestionsUseCase,
)
from qna.application.usecase.topic import ListTopicsUseCase
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


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_register_use_case(
        self, user_service: UserService, password_service: PasswordService
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(
            user_service=user_service, password_service=password_service
        )

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self,
        jwt_service: JWTService,
        user_service: UserService,
        password_service: PasswordService,
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(
            jwt_service=jwt_service,
            user_service=user_service,
            password_service=password_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(jwt_service=jwt_service, user_service=user_service)

    # Topic use cases
    @provide(scope=Scope.REQUEST)
    def get_list_topics_use_case(self, topic_service: TopicService) -> ListTopicsUseCase:
        """Provide list topics use case."""
        return ListTopicsUseCase(topic_service=topic_service)

    # Question use cases
    @provide(scope=Scope.REQUEST)
    def get_create_question_use_case(
        self,
        question_service: QuestionService,
        topic_service: TopicService,
        user_service: UserService,
    ) -> CreateQuestionUseCase:
        """Provide create question use case."""
        return CreateQuestionUseCase(
            question_service=question_service,
            topic_service=topic_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_questions_use_case(
        self, question_service: QuestionService
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(question_service=question_service)

    @provide(scope=Scope.REQUEST)
    def get_get_question_use_case(
        self, question_service: QuestionService
    ) -> GetQuestionUseCase:
        """Provide get question use case."""
        return GetQuestionUseCase(question_service=question_service)

    # Answer use cases
    @provide(scope=Scope.REQUEST)
    def get_create_answer_use_case(
        self,
        answer_service: AnswerService,
        question_service: QuestionService,
        user_service: UserService,
    ) -> CreateAnswerUseCase:
        """Provide create answer use case."""
        return CreateAnswerUseCase(
            answer_service=answer_service,
            question_service=question_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_answers_use_case(
        self,
        answer_service: AnswerService,
        question_service: QuestionService,
        like_service: LikeService,
        jwt_service: JWTService,
    ) -> ListAnswersUseCase:
        """Provide list answers use case."""
        return ListAnswersUseCase(
            answer_service=answer_service,
            question_service=question_service,
            like_service=like_service,
            jwt_service=jwt_service,
        )

    # Like use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_like_use_case(self, like_service: LikeService) -> ToggleLikeUseCase:
        """Provide toggle like use case."""
        return ToggleLikeUseCase(like_service=like_service)
