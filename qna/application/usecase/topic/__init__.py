"""Topic use cases."""

from .list_topics import (
    ListTopicsRequest,
    ListTopicsResponse,
    ListTopicsUseCase,
    TopicItem,
)

__all__ = [
    "ListTopicsRequest",
    "ListTopicsResponse",
    "ListTopicsUseCase",
    "TopicItem",
]
