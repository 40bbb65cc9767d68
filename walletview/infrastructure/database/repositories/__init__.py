"""SQLAlchemy-backed repository implementations."""

from .balance_repository import SqlBalanceRepository
from .topup_repository import SqlTopupRepository
from .transfer_repository import SqlTransferRepository
from .user_repository import SqlUserRepository

__all__ = [
    "SqlBalanceRepository",
    "SqlTopupRepository",
    "SqlTransferRepository",
    "SqlUserRepository",
]
