"""Domain model for the dashboard page."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from walletview.modules.balances import BalanceSnapshot
from walletview.modules.transactions import UnifiedTransaction


@dataclass(slots=True)
class DashboardSummary:
    user_name: Optional[str]
    balance: BalanceSnapshot
    recent_activity: list[UnifiedTransaction] = field(default_factory=list)
