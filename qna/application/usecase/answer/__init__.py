"""Answer use cases."""

from .create_answer import (
    CreateAnswerRequest,
    CreateAnswerResponse,
    CreateAnswerUseCase,
)
from .list_answers import (
    AnswerItem,
    ListAnswersRequest,
    ListAnswersResponse,
    ListAnswersUseCase,
)

__all__ = [
    "AnswerItem",
    "CreateAnswerRequest",
    "CreateAnswerResponse",
    "CreateAnswerUseCase",
    "ListAnswersRequest",
    "ListAnswersResponse",
    "ListAnswersUseCase",
]
