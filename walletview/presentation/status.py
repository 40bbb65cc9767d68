"""Status classification and badge styling."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from walletview.modules.transactions.models import (
    FAILED_STATUSES,
    PENDING_STATUSES,
    SETTLED_STATUSES,
    Direction,
)


class StatusBucket(str, enum.Enum):
    SETTLED = "settled"
    PENDING = "pending"
    FAILED = "failed"
    UNKNOWN = "unknown"


@dataclass(slots=True, frozen=True)
class StatusStyle:
    icon: str
    color: str


STATUS_STYLES: dict[StatusBucket, StatusStyle] = {
    StatusBucket.SETTLED: StatusStyle(icon="✔", color="green"),
    StatusBucket.PENDING: StatusStyle(icon="⏱", color="amber"),
    StatusBucket.FAILED: StatusStyle(icon="✖", color="red"),
    StatusBucket.UNKNOWN: StatusStyle(icon="⚠", color="slate"),
}

DIRECTION_ICONS: dict[Direction, str] = {
    Direction.CREDIT: "↙",
    Direction.DEBIT: "↗",
}


def classify_status(status: str | None) -> StatusBucket:
    value = (status or "").lower()
    if value in SETTLED_STATUSES:
        return StatusBucket.SETTLED
    if value in PENDING_STATUSES:
        return StatusBucket.PENDING
    if value in FAILED_STATUSES:
        return StatusBucket.FAILED
    return StatusBucket.UNKNOWN


def status_style(status: str | None) -> StatusStyle:
    return STATUS_STYLES[classify_status(status)]


def transaction_icon(direction: Direction, status: str | None) -> str:
    """Pending and failed rows show their status glyph, everything else an arrow."""
    bucket = classify_status(status)
    if bucket in (StatusBucket.PENDING, StatusBucket.FAILED):
        return STATUS_STYLES[bucket].icon
    return DIRECTION_ICONS[direction]


__all__ = [
    "DIRECTION_ICONS",
    "STATUS_STYLES",
    "StatusBucket",
    "StatusStyle",
    "classify_status",
    "status_style",
    "transaction_icon",
]
