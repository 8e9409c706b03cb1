"""PostgreSQL implementation of Profile repository."""

from typing import Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tapestry.domain.model import Profile
from tapestry.domain.repository import ProfileRepository
from tapestry.domain.value import UserId
from tapestry.persistence.mappers import profile_to_dict, row_to_profile
from tapestry.persistence.tables import profiles_table


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[Profile]:
        """Find a profile by account ID."""
        stmt = select(profiles_table).where(profiles_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_profile(row._asdict()) if row else None

    async def find_by_ids(self, user_ids: Iterable[UserId]) -> List[Profile]:
        """Find the profiles of several accounts in one query."""
        ids = list(user_ids)
        if not ids:
            return []

        stmt = select(profiles_table).where(profiles_table.c.id.in_(ids))
        result = await self.session.execute(stmt)
        return [row_to_profile(row._asdict()) for row in result.fetchall()]

    async def save(self, profile: Profile) -> Profile:
        """Insert or update a profile."""
        profile_dict = profile_to_dict(profile)
        existing = await self.find_by_id(profile.id)

        if existing:
            # created_at belongs to the first insert
            profile_dict.pop("created_at")
            stmt = (
                profiles_table.update()
                .where(profiles_table.c.id == profile.id)
                .values(**profile_dict)
            )
        else:
            stmt = profiles_table.insert().values(**profile_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return await self.find_by_id(profile.id) or profile
