"""Domain models for the unified transaction feed.

Two sources feed the history page: top-ups (money added from an external
instrument) and peer transfers between wallet users.  Each source has its
own record type; both are normalized into ``UnifiedTransaction`` before
they are merged.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar, Optional, Union

from walletview.core.exceptions import InvalidTransactionError


class Direction(str, enum.Enum):
    CREDIT = "credit"
    DEBIT = "debit"


class TransactionSource(str, enum.Enum):
    TOPUP = "topup"
    TRANSFER = "transfer"


SETTLED_STATUSES = frozenset({"success", "completed"})
PENDING_STATUSES = frozenset({"processing", "pending"})
FAILED_STATUSES = frozenset({"failed", "declined"})

# Peer transfers are only recorded once committed.
TRANSFER_STATUS = "success"


@dataclass(slots=True, frozen=True)
class TopUpRecord:
    source: ClassVar[TransactionSource] = TransactionSource.TOPUP

    id: int
    start_time: datetime
    amount: int
    status: str
    provider: Optional[str] = None


@dataclass(slots=True, frozen=True)
class PeerTransferRecord:
    source: ClassVar[TransactionSource] = TransactionSource.TRANSFER

    id: int
    timestamp: datetime
    amount: int
    from_user_id: int
    to_user_id: int
    from_user_name: Optional[str] = None
    to_user_name: Optional[str] = None


SourceRecord = Union[TopUpRecord, PeerTransferRecord]


@dataclass(slots=True, frozen=True)
class UnifiedTransaction:
    time: datetime
    amount: int
    direction: Direction
    status: str
    counterparty_label: str
    activity_label: str
    source: TransactionSource
    source_id: int

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise InvalidTransactionError(
                f"{self.source.value} {self.source_id} has negative amount {self.amount}"
            )

    @property
    def is_settled(self) -> bool:
        return self.status.lower() in SETTLED_STATUSES

    @property
    def is_pending(self) -> bool:
        return self.status.lower() in PENDING_STATUSES


@dataclass(slots=True)
class TransactionFeed:
    transactions: list[UnifiedTransaction] = field(default_factory=list)
    total_settled: int = 0
    pending_count: int = 0

    @property
    def total_count(self) -> int:
        return len(self.transactions)

    def __iter__(self):
        return iter(self.transactions)

    def __len__(self) -> int:
        return len(self.transactions)
