"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model import User
from qna.domain.repository import UserRepository
from qna.domain.value import UserId
from qna.persistence.mappers import row_to_user, user_to_dict
from qna.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email."""
        stmt = select(users_table).where(users_table.c.email == email)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> User:
        """Save a user (create)."""
        async with self.session.begin_nested():
            await self.session.execute(insert(users_table).values(**user_to_dict(user)))
        return user

    async def count(self) -> int:
        """Count registered users."""
        result = await self.session.execute(
            select(func.count()).select_from(users_table)
        )
        return result.scalar_one()
