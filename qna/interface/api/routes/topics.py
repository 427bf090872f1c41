"""Topic routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status

from qna.application.usecase.topic import (
    ListTopicsRequest,
    ListTopicsResponse,
    ListTopicsUseCase,
)

router = APIRouter(
    prefix="/topics",
    tags=["topics"],
    route_class=DishkaRoute,
)


@router.get(
    "",
    response_model=ListTopicsResponse,
    summary="List all available topics",
    description="Get a list of all topics questions can be tagged with.",
)
async def list_topics(
    use_case: FromDishka[ListTopicsUseCase],
    limit: int = 100,
    order_by: str = "name",
) -> ListTopicsResponse:
    """List all available topics.

    Args:
        use_case: List topics use case (injected)
        limit: Maximum number of topics to return (1-100)
        order_by: Sort order ('name' or 'created_at')

    Returns:
        List of topics

    Example:
        GET /topics?limit=10&order_by=name
    """
    with logfire.span("api.list_topics", limit=limit, order_by=order_by):
        try:
            request = ListTopicsRequest(limit=limit, order_by=order_by)
        except ValueError as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(e),
            )
        return await use_case.execute(request)
