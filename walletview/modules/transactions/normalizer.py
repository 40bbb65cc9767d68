"""Map source-specific records onto ``UnifiedTransaction``."""

from __future__ import annotations

from datetime import datetime, timezone
from functools import singledispatch
from typing import Iterable

from .models import (
    TRANSFER_STATUS,
    Direction,
    PeerTransferRecord,
    SourceRecord,
    TopUpRecord,
    UnifiedTransaction,
)

DEFAULT_PROVIDER = "UPI"

TOPUP_LABEL = "Money Added"
RECEIVED_LABEL = "Received from"
SENT_LABEL = "Sent to"


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive timestamps so both sources compare."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@singledispatch
def normalize(record: SourceRecord, viewer_id: int, *, default_provider: str = DEFAULT_PROVIDER) -> UnifiedTransaction:
    raise TypeError(f"Unsupported transaction record: {type(record).__name__}")


@normalize.register
def _(record: TopUpRecord, viewer_id: int, *, default_provider: str = DEFAULT_PROVIDER) -> UnifiedTransaction:
    return UnifiedTransaction(
        time=as_utc(record.start_time),
        amount=record.amount,
        direction=Direction.CREDIT,
        status=record.status,
        counterparty_label=record.provider or default_provider,
        activity_label=TOPUP_LABEL,
        source=record.source,
        source_id=record.id,
    )


@normalize.register
def _(record: PeerTransferRecord, viewer_id: int, *, default_provider: str = DEFAULT_PROVIDER) -> UnifiedTransaction:
    is_credit = record.to_user_id == viewer_id
    if is_credit:
        counterparty = record.from_user_name or str(record.from_user_id)
    else:
        counterparty = record.to_user_name or str(record.to_user_id)
    return UnifiedTransaction(
        time=as_utc(record.timestamp),
        amount=record.amount,
        direction=Direction.CREDIT if is_credit else Direction.DEBIT,
        status=TRANSFER_STATUS,
        counterparty_label=counterparty,
        activity_label=RECEIVED_LABEL if is_credit else SENT_LABEL,
        source=record.source,
        source_id=record.id,
    )


def normalize_all(
    records: Iterable[SourceRecord],
    viewer_id: int,
    *,
    default_provider: str = DEFAULT_PROVIDER,
) -> list[UnifiedTransaction]:
    return [normalize(record, viewer_id, default_provider=default_provider) for record in records]


__all__ = [
    "DEFAULT_PROVIDER",
    "RECEIVED_LABEL",
    "SENT_LABEL",
    "TOPUP_LABEL",
    "as_utc",
    "normalize",
    "normalize_all",
]
