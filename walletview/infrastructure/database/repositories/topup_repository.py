"""SQLAlchemy implementation for top-up reads"""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from walletview.infrastructure.database.models import OnRampTransaction


class SqlTopupRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_for_user(self, user_id: int) -> Sequence[OnRampTransaction]:
        stmt = (
            select(OnRampTransaction)
            .where(OnRampTransaction.user_id == user_id)
            .order_by(desc(OnRampTransaction.start_time))
        )
        result = await self.session.execute(stmt)
        return result.scalars().all()
