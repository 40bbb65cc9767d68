"""Repository protocols for the two transaction sources."""

from __future__ import annotations

from typing import Protocol, Sequence

from walletview.infrastructure.database.models import OnRampTransaction, P2PTransfer


class TopupRepository(Protocol):
    async def list_for_user(self, user_id: int) -> Sequence[OnRampTransaction]:
        """Top-ups of ``user_id``, newest ``start_time`` first."""
        ...


class TransferRepository(Protocol):
    async def list_for_user(self, user_id: int) -> Sequence[P2PTransfer]:
        """Transfers sent or received by ``user_id`` with both parties loaded, newest first."""
        ...
