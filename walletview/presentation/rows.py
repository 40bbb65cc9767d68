"""View models handed to the templates."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional

from walletview.core.config import DisplaySettings
from walletview.modules.balances import BalanceSnapshot
from walletview.modules.transactions import Direction, TransactionFeed, UnifiedTransaction

from .formatting import (
    format_money,
    format_percentage,
    format_relative_time,
    format_signed_amount,
    format_transaction_time,
)
from .providers import provider_icon
from .status import status_style, transaction_icon


@dataclass(slots=True, frozen=True)
class TransactionRow:
    counterparty: str
    activity_label: str
    direction: Direction
    status: str
    status_icon: str
    status_color: str
    provider_icon: str
    transaction_icon: str
    amount_text: str
    time_text: str
    relative_time_text: str


@dataclass(slots=True, frozen=True)
class FeedSummary:
    total_settled_text: str
    total_count: int
    pending_count: int


@dataclass(slots=True, frozen=True)
class BalanceView:
    available_text: str
    locked_text: str
    has_locked: bool
    available_percentage: float
    available_percentage_text: str


def build_row(
    txn: UnifiedTransaction,
    display: DisplaySettings,
    *,
    now: Optional[datetime] = None,
) -> TransactionRow:
    style = status_style(txn.status)
    return TransactionRow(
        counterparty=txn.counterparty_label,
        activity_label=txn.activity_label,
        direction=txn.direction,
        status=txn.status,
        status_icon=style.icon,
        status_color=style.color,
        provider_icon=provider_icon(txn.counterparty_label),
        transaction_icon=transaction_icon(txn.direction, txn.status),
        amount_text=format_signed_amount(
            txn.amount,
            txn.direction,
            txn.status,
            locale=display.locale,
            currency=display.currency,
        ),
        time_text=format_transaction_time(txn.time, now=now, tz=display.timezone, locale=display.locale),
        relative_time_text=format_relative_time(txn.time, now=now),
    )


def build_rows(
    transactions: Iterable[UnifiedTransaction],
    display: DisplaySettings,
    *,
    now: Optional[datetime] = None,
) -> list[TransactionRow]:
    return [build_row(txn, display, now=now) for txn in transactions]


def build_feed_summary(feed: TransactionFeed, display: DisplaySettings) -> FeedSummary:
    return FeedSummary(
        total_settled_text=format_money(feed.total_settled, locale=display.locale, currency=display.currency),
        total_count=feed.total_count,
        pending_count=feed.pending_count,
    )


def build_balance_view(balance: BalanceSnapshot, display: DisplaySettings) -> BalanceView:
    percentage = balance.available_percentage
    return BalanceView(
        available_text=format_money(balance.amount, locale=display.locale, currency=display.currency),
        locked_text=format_money(balance.locked, locale=display.locale, currency=display.currency),
        has_locked=balance.locked > 0,
        available_percentage=percentage,
        available_percentage_text=format_percentage(percentage),
    )
