"""List topics use case."""

import logfire
from datetime import datetime

from pydantic import BaseModel, Field

from qna.application.usecase.base import BaseUseCase
from qna.domain.service import TopicService


class TopicItem(BaseModel):
    """Topic item in response."""

    name: str
    created_at: datetime


class ListTopicsRequest(BaseModel):
    """List topics request."""

    limit: int = Field(default=100, ge=1, le=100)
    order_by: str = Field(default="name", pattern="^(name|created_at)$")


class ListTopicsResponse(BaseModel):
    """List topics response."""

    topics: list[TopicItem]


class ListTopicsUseCase(BaseUseCase[ListTopicsRequest, ListTopicsResponse]):
    """Use case for listing available topics."""

    def __init__(self, topic_service: TopicService) -> None:
        """Initialize list topics use case.

        Args:
            topic_service: Topic domain service
        """
        self.topic_service = topic_service

    async def execute(self, request: ListTopicsRequest) -> ListTopicsResponse:
        """Execute list topics flow.

        Args:
            request: List topics request

        Returns:
            List of all available topics
        """
        with logfire.span(
            "list_topics.execute",
            limit=request.limit,
            order_by=request.order_by,
        ):
            topics = await self.topic_service.get_all_topics(
                limit=request.limit,
                order_by=request.order_by,
            )

            return ListTopicsResponse(
                topics=[
                    TopicItem(name=topic.name.root, created_at=topic.created_at)
                    for topic in topics
                ]
            )
