"""Pure formatting helpers and view models for the rendered pages."""

from .formatting import (
    first_name,
    format_long_date,
    format_money,
    format_relative_time,
    format_signed_amount,
    format_transaction_time,
)
from .providers import PROVIDER_ICONS, provider_icon
from .rows import (
    BalanceView,
    FeedSummary,
    TransactionRow,
    build_balance_view,
    build_feed_summary,
    build_row,
    build_rows,
)
from .status import STATUS_STYLES, StatusBucket, classify_status, transaction_icon

__all__ = [
    "BalanceView",
    "FeedSummary",
    "PROVIDER_ICONS",
    "STATUS_STYLES",
    "StatusBucket",
    "TransactionRow",
    "build_balance_view",
    "build_feed_summary",
    "build_row",
    "build_rows",
    "classify_status",
    "first_name",
    "format_long_date",
    "format_money",
    "format_relative_time",
    "format_signed_amount",
    "format_transaction_time",
    "provider_icon",
    "transaction_icon",
]
