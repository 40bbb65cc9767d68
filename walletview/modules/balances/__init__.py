"""Balance domain exports"""

from .models import BalanceSnapshot
from .service import BalanceService

__all__ = [
    "BalanceSnapshot",
    "BalanceService",
]
