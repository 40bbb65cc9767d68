"""Repository protocol for balance reads."""

from __future__ import annotations

from typing import Protocol

from walletview.infrastructure.database.models import Balance as BalanceModel


class BalanceRepository(Protocol):
    async def get_by_user(self, user_id: int) -> BalanceModel | None:
        ...
