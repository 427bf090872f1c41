"""FastAPI application factory."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from qna.config import Settings
from qna.interface.api.routes import answers, auth, health, likes, questions, topics
from qna.util.di.container import create_container, setup_di
from qna.util.observability import instrument_fastapi

ROUTERS = (
    health.router,
    auth.router,
    topics.router,
    questions.router,
    answers.router,
    likes.router,
)


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Build the API.

    Tests pass their own container (in-memory persistence); everything
    else gets the production container.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Ask Board API",
        description="Questions, answers and liked answers",
        version="0.1.0",
    )
    instrument_fastapi(app_instance)

    # Credentials are needed for the auth cookie; likes use PUT
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())

    for router in ROUTERS:
        app_instance.include_router(router)

    return app_instance


# Imported by uvicorn; start_app.py configures logfire first
app = create_app()
