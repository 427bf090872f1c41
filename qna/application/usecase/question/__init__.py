"""Question use cases."""

from .create_question import (
    CreateQuestionRequest,
    CreateQuestionResponse,
    CreateQuestionUseCase,
)
from .get_question import GetQuestionRequest, GetQuestionResponse, GetQuestionUseCase
from .list_questions import (
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    QuestionListItem,
)

__all__ = [
    "CreateQuestionRequest",
    "CreateQuestionResponse",
    "CreateQuestionUseCase",
    "GetQuestionRequest",
    "GetQuestionResponse",
    "GetQuestionUseCase",
    "ListQuestionsRequest",
    "ListQuestionsResponse",
    "ListQuestionsUseCase",
    "QuestionListItem",
]
