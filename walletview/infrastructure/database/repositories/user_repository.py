"""SQLAlchemy implementation for user lookups"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from walletview.infrastructure.database.models import User


class SqlUserRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_display_name(self, user_id: int) -> str | None:
        stmt = select(User.name).where(User.id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
