"""seed_topics

Revision ID: 9b51e07c2a66
Revises: 3f2a9c41d7e0
Create Date: 2026-10-12 14:20:47.918305

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "9b51e07c2a66"
down_revision: Union[str, Sequence[str], None] = "3f2a9c41d7e0"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


TOPICS = [
    "JavaScript",
    "React",
    "Node.js",
    "TypeScript",
    "Python",
    "MongoDB",
    "Next.js",
    "Web Development",
    "Database",
    "API",
    "CSS",
    "HTML",
    "Programming",
    "Software Engineering",
    "Frontend",
    "Backend",
    "Full Stack",
    "DevOps",
    "Machine Learning",
    "Data Science",
]


def upgrade() -> None:
    """Seed initial topics."""
    topics_table = sa.table("topics", sa.column("name", sa.String))

    op.bulk_insert(topics_table, [{"name": name} for name in TOPICS])


def downgrade() -> None:
    """Remove seeded topics."""
    topics_table = sa.table("topics", sa.column("name", sa.String))

    op.execute(topics_table.delete().where(topics_table.c.name.in_(TOPICS)))
