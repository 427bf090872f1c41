"""Domain services."""

from .answer_service import AnswerService
from .base import Service
from .jwt_service import JWTService
from .like_service import LikeCountReport, LikeService, LikeToggleResult
from .password_service import PasswordService
from .question_service import QuestionService
from .topic_service import TopicService
from .user_service import UserService

__all__ = [
    "AnswerService",
    "JWTService",
    "LikeCountReport",
    "LikeService",
    "LikeToggleResult",
    "PasswordService",
    "QuestionService",
    "Service",
    "TopicService",
    "UserService",
]
