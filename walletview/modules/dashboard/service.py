"""Dashboard domain service"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from walletview.infrastructure.database.repositories.user_repository import SqlUserRepository
from walletview.modules.balances import BalanceService
from walletview.modules.transactions import TransactionService, recent
from walletview.modules.transactions.normalizer import DEFAULT_PROVIDER

from .models import DashboardSummary
from .repository import UserRepository


@dataclass(slots=True)
class DashboardService:
    balances: BalanceService
    transactions: TransactionService
    users: UserRepository

    @classmethod
    def with_session(cls, session: AsyncSession, *, default_provider: str = DEFAULT_PROVIDER) -> "DashboardService":
        return cls(
            balances=BalanceService.with_session(session),
            transactions=TransactionService.with_session(session, default_provider=default_provider),
            users=SqlUserRepository(session),
        )

    async def get_summary(self, user_id: Optional[int], *, recent_limit: int = 5) -> DashboardSummary:
        # Balance and feed are independent reads, not a consistent snapshot.
        balance = await self.balances.get_balance(user_id)
        if user_id is None:
            return DashboardSummary(user_name=None, balance=balance)

        feed = await self.transactions.get_feed(user_id)
        return DashboardSummary(
            user_name=await self.users.get_display_name(user_id),
            balance=balance,
            recent_activity=recent(feed, recent_limit),
        )
