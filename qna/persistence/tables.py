"""SQLAlchemy table definitions for the Q&A board.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

from qna.domain.repository.like import UNIQUE_LIKE_CONSTRAINT

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(50), nullable=False),
    Column("email", String(255), nullable=False),
    Column("password_hash", String(255), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("email", name="uq_users_email"),
)

# ============================================================================
# TOPICS TABLE
# ============================================================================
topics_table = Table(
    "topics",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(50), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("name", name="uq_topics_name"),
)

# ============================================================================
# QUESTIONS TABLE
# ============================================================================
questions_table = Table(
    "questions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(300), nullable=False),
    Column("description", Text, nullable=True),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("author_username", String(50), nullable=False),  # Denormalized from users
    Column("answer_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("answer_count >= 0", name="answer_count_non_negative"),
)

Index("idx_questions_created_at", questions_table.c.created_at.desc())
Index("idx_questions_author_id", questions_table.c.author_id)

# ============================================================================
# QUESTION_TOPICS TABLE (junction table for many-to-many relationship)
# ============================================================================
question_topics_table = Table(
    "question_topics",
    metadata,
    Column(
        "question_id",
        UUID,
        ForeignKey("questions.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "topic_id", UUID, ForeignKey("topics.id", ondelete="RESTRICT"), primary_key=True
    ),
)

Index("idx_question_topics_topic_id", question_topics_table.c.topic_id)

# ============================================================================
# ANSWERS TABLE
# ============================================================================
answers_table = Table(
    "answers",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "question_id",
        UUID,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("author_username", String(50), nullable=False),  # Denormalized from users
    Column("text", Text, nullable=False),
    Column("like_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("like_count >= 0", name="like_count_non_negative"),
)

Index("idx_answers_question_id", answers_table.c.question_id)

# ============================================================================
# LIKES TABLE
# ============================================================================
likes_table = Table(
    "likes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "answer_id", UUID, ForeignKey("answers.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "answer_id", name=UNIQUE_LIKE_CONSTRAINT),
)

Index("idx_likes_answer_id", likes_table.c.answer_id)
