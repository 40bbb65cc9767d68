"""Balance domain service"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from walletview.infrastructure.database.models import Balance as BalanceModel
from walletview.infrastructure.database.repositories.balance_repository import SqlBalanceRepository

from .models import BalanceSnapshot
from .repository import BalanceRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BalanceService:
    repository: BalanceRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "BalanceService":
        return cls(SqlBalanceRepository(session))

    async def get_balance(self, user_id: Optional[int]) -> BalanceSnapshot:
        """Return the user's balance, zeroed when there is no user or no row."""
        if user_id is None:
            return BalanceSnapshot(user_id=None)
        balance = await self.repository.get_by_user(user_id)
        if balance is None:
            logger.debug("No balance row for user %s, defaulting to zero", user_id)
            return BalanceSnapshot(user_id=user_id)
        return self._to_snapshot(user_id, balance)

    @staticmethod
    def _to_snapshot(user_id: int, model: BalanceModel) -> BalanceSnapshot:
        return BalanceSnapshot(
            user_id=user_id,
            amount=model.amount or 0,
            locked=model.locked or 0,
        )
