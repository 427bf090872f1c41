"""initial_schema

Create the schema for the Ask Board:
- Users (email/password accounts)
- Topics (seeded separately)
- Questions (tagged with up to five topics)
- Answers (with denormalized like_count)
- Likes (one per user per answer)

Revision ID: 3f2a9c41d7e0
Revises:
Create Date: 2026-10-12 14:03:11.402118

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f2a9c41d7e0"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id_column() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def _created_at_column() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        _id_column(),
        sa.Column("username", sa.String(50), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )

    # ========================================================================
    # TOPICS table
    # ========================================================================
    op.create_table(
        "topics",
        _id_column(),
        sa.Column("name", sa.String(50), nullable=False),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name", name="uq_topics_name"),
    )

    # ========================================================================
    # QUESTIONS table
    # ========================================================================
    op.create_table(
        "questions",
        _id_column(),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("author_username", sa.String(50), nullable=False),
        sa.Column("answer_count", sa.Integer(), nullable=False, server_default="0"),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.CheckConstraint("answer_count >= 0", name="answer_count_non_negative"),
    )
    op.create_index(
        "idx_questions_created_at", "questions", [sa.text("created_at DESC")]
    )
    op.create_index("idx_questions_author_id", "questions", ["author_id"])

    # ========================================================================
    # QUESTION_TOPICS table (junction)
    # ========================================================================
    op.create_table(
        "question_topics",
        sa.Column("question_id", sa.UUID(), nullable=False),
        sa.Column("topic_id", sa.UUID(), nullable=False),
        sa.PrimaryKeyConstraint("question_id", "topic_id"),
        sa.ForeignKeyConstraint(["question_id"], ["questions.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["topic_id"], ["topics.id"], ondelete="RESTRICT"),
    )
    op.create_index("idx_question_topics_topic_id", "question_topics", ["topic_id"])

    # ========================================================================
    # ANSWERS table
    # ========================================================================
    op.create_table(
        "answers",
        _id_column(),
        sa.Column("question_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("author_username", sa.String(50), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("like_count", sa.Integer(), nullable=False, server_default="0"),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["question_id"], ["questions.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.CheckConstraint("like_count >= 0", name="like_count_non_negative"),
    )
    op.create_index("idx_answers_question_id", "answers", ["question_id"])

    # ========================================================================
    # LIKES table
    # ========================================================================
    op.create_table(
        "likes",
        _id_column(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("answer_id", sa.UUID(), nullable=False),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["answer_id"], ["answers.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("user_id", "answer_id", name="uq_like_user_answer"),
    )
    op.create_index("idx_likes_answer_id", "likes", ["answer_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("likes")
    op.drop_table("answers")
    op.drop_table("question_topics")
    op.drop_table("questions")
    op.drop_table("topics")
    op.drop_table("users")
