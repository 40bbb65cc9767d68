"""SQLAlchemy implementation for balance reads"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from walletview.infrastructure.database.models import Balance


class SqlBalanceRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_user(self, user_id: int) -> Balance | None:
        stmt = select(Balance).where(Balance.user_id == user_id)
        result = await self.session.execute(stmt)
        return result.scalars().first()
