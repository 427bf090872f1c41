"""Row factories for integration tests.

Rows are committed with the request scope and never cleaned up, so every
factory uses fresh ids and emails.
"""

from uuid import uuid4

from dishka import AsyncContainer

from qna.domain.model import Answer, Question, User
from qna.domain.repository import AnswerRepository, QuestionRepository, UserRepository
from qna.domain.value import AnswerId, QuestionId, UserId, Username


async def create_user(container: AsyncContainer) -> User:
    user_repo = await container.get(UserRepository)
    suffix = uuid4().hex[:12]
    return await user_repo.save(
        User(
            id=UserId(uuid4()),
            username=Username(f"user-{suffix}"),
            email=f"{suffix}@example.com",
            password_hash="unused",
        )
    )


async def create_answer(container: AsyncContainer) -> Answer:
    """Create an author, a question and an answer to it."""
    author = await create_user(container)
    question_repo = await container.get(QuestionRepository)
    question = await question_repo.save(
        Question(
            id=QuestionId(uuid4()),
            title="Integration question",
            author_id=author.id,
            author_username=author.username,
        )
    )
    answer_repo = await container.get(AnswerRepository)
    return await answer_repo.save(
        Answer(
            id=AnswerId(uuid4()),
            question_id=question.id,
            author_id=author.id,
            author_username=author.username,
            text="Integration answer",
        )
    )
