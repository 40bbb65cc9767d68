"""SQLAlchemy implementation for peer transfer reads"""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import desc, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from walletview.infrastructure.database.models import P2PTransfer


class SqlTransferRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_for_user(self, user_id: int) -> Sequence[P2PTransfer]:
        stmt = (
            select(P2PTransfer)
            .where(or_(P2PTransfer.from_user_id == user_id, P2PTransfer.to_user_id == user_id))
            .options(selectinload(P2PTransfer.from_user), selectinload(P2PTransfer.to_user))
            .order_by(desc(P2PTransfer.timestamp))
        )
        result = await self.session.execute(stmt)
        return result.scalars().all()
