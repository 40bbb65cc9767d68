"""Transaction history domain exports"""

from .models import (
    Direction,
    PeerTransferRecord,
    SourceRecord,
    TopUpRecord,
    TransactionFeed,
    TransactionSource,
    UnifiedTransaction,
)
from .normalizer import normalize, normalize_all
from .presenter import build_feed, merge_transactions, recent
from .service import TransactionService

__all__ = [
    "Direction",
    "PeerTransferRecord",
    "SourceRecord",
    "TopUpRecord",
    "TransactionFeed",
    "TransactionSource",
    "UnifiedTransaction",
    "TransactionService",
    "build_feed",
    "merge_transactions",
    "normalize",
    "normalize_all",
    "recent",
]
