#!/usr/bin/env python3
"""Database maintenance utilities.

Usage:
    python scripts/db_util.py stats   # Row counts per table
    python scripts/db_util.py check   # Compare every like_count with the likes ledger
    python scripts/db_util.py clear   # Delete all rows (topics included)
"""

import argparse
import asyncio
import sys

import logfire
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from qna.config import Settings
from qna.domain.repository import (
    AnswerRepository,
    LikeRepository,
    QuestionRepository,
    TopicRepository,
    UserRepository,
)
from qna.domain.service import LikeService
from qna.persistence.tables import (
    answers_table,
    likes_table,
    question_topics_table,
    questions_table,
    topics_table,
    users_table,
)
from qna.util.di.container import create_container
from qna.util.observability import configure_logfire


async def show_stats() -> int:
    container = create_container()
    try:
        async with container() as request_container:
            users = await (await request_container.get(UserRepository)).count()
            topics = await (await request_container.get(TopicRepository)).count()
            questions = await (await request_container.get(QuestionRepository)).count()
            answers = await (await request_container.get(AnswerRepository)).count()
            likes = await (await request_container.get(LikeRepository)).count()
    finally:
        await container.close()

    print("Database statistics:")
    print(f"  Users:     {users}")
    print(f"  Topics:    {topics}")
    print(f"  Questions: {questions}")
    print(f"  Answers:   {answers}")
    print(f"  Likes:     {likes}")
    return 0


async def check_like_counts() -> int:
    """Report answers whose like_count disagrees with the likes ledger.

    Only reports. Exits non-zero when any drift is found.
    """
    container = create_container()
    drifted = 0
    try:
        async with container() as request_container:
            session = await request_container.get(AsyncSession)
            like_service = await request_container.get(LikeService)

            result = await session.execute(select(answers_table.c.id))
            answer_ids = result.scalars().all()

            for answer_id in answer_ids:
                report = await like_service.check_like_count(answer_id)
                if not report.consistent:
                    drifted += 1
                    print(
                        f"  {report.answer_id}: like_count={report.like_count} "
                        f"ledger={report.ledger_count}"
                    )
    finally:
        await container.close()

    print(f"Checked {len(answer_ids)} answers, {drifted} with drift")
    return 1 if drifted else 0


async def clear_database() -> int:
    container = create_container()
    try:
        async with container() as request_container:
            session = await request_container.get(AsyncSession)
            # Children first
            for table in (
                likes_table,
                answers_table,
                question_topics_table,
                questions_table,
                topics_table,
                users_table,
            ):
                await session.execute(delete(table))
            # Committed when the request scope closes
    finally:
        await container.close()

    logfire.info("Database cleared")
    print("Database cleared")
    return 0


ACTIONS = {
    "stats": show_stats,
    "check": check_like_counts,
    "clear": clear_database,
}


def main() -> int:
    parser = argparse.ArgumentParser(description="Ask Board database utilities")
    parser.add_argument("action", choices=sorted(ACTIONS))
    args = parser.parse_args()

    configure_logfire(Settings())

    with logfire.span("db_util", action=args.action):
        return asyncio.run(ACTIONS[args.action]())


if __name__ == "__main__":
    sys.exit(main())
