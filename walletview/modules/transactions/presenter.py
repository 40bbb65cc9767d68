"""Merge normalized transactions into one feed and derive its aggregates."""

from __future__ import annotations

from typing import Iterable

from .models import TransactionFeed, TransactionSource, UnifiedTransaction

# Equal timestamps: top-ups sort ahead of transfers, then newer row ids first.
_SOURCE_PRIORITY = {
    TransactionSource.TOPUP: 1,
    TransactionSource.TRANSFER: 0,
}


def _sort_key(txn: UnifiedTransaction):
    return (txn.time, _SOURCE_PRIORITY[txn.source], txn.source_id)


def merge_transactions(*sources: Iterable[UnifiedTransaction]) -> list[UnifiedTransaction]:
    merged = [txn for source in sources for txn in source]
    merged.sort(key=_sort_key, reverse=True)
    return merged


def total_settled(transactions: Iterable[UnifiedTransaction]) -> int:
    return sum(txn.amount for txn in transactions if txn.is_settled)


def pending_count(transactions: Iterable[UnifiedTransaction]) -> int:
    return sum(1 for txn in transactions if txn.is_pending)


def build_feed(*sources: Iterable[UnifiedTransaction]) -> TransactionFeed:
    merged = merge_transactions(*sources)
    return TransactionFeed(
        transactions=merged,
        total_settled=total_settled(merged),
        pending_count=pending_count(merged),
    )


def recent(feed: TransactionFeed, limit: int) -> list[UnifiedTransaction]:
    return feed.transactions[:max(limit, 0)]


__all__ = [
    "build_feed",
    "merge_transactions",
    "pending_count",
    "recent",
    "total_settled",
]
