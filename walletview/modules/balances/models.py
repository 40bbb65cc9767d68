"""Domain models for wallet balances."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True, frozen=True)
class BalanceSnapshot:
    user_id: Optional[int]
    amount: int = 0
    locked: int = 0

    @property
    def total(self) -> int:
        return self.amount + self.locked

    @property
    def available_percentage(self) -> float:
        if self.total <= 0:
            return 0.0
        return min(self.amount / self.total * 100, 100.0)
