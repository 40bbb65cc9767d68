"""Transaction history service."""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from walletview.infrastructure.database.models import OnRampTransaction, P2PTransfer
from walletview.infrastructure.database.repositories.topup_repository import SqlTopupRepository
from walletview.infrastructure.database.repositories.transfer_repository import SqlTransferRepository

from .models import PeerTransferRecord, TopUpRecord, TransactionFeed
from .normalizer import DEFAULT_PROVIDER, normalize_all
from .presenter import build_feed
from .repository import TopupRepository, TransferRepository

logger = logging.getLogger(__name__)


class TransactionService:
    """Reads both transaction sources for one user and merges them into a feed."""

    def __init__(
        self,
        topups: TopupRepository,
        transfers: TransferRepository,
        *,
        default_provider: str = DEFAULT_PROVIDER,
    ) -> None:
        self._topups = topups
        self._transfers = transfers
        self._default_provider = default_provider

    @classmethod
    def with_session(cls, session: AsyncSession, *, default_provider: str = DEFAULT_PROVIDER) -> "TransactionService":
        return cls(
            SqlTopupRepository(session),
            SqlTransferRepository(session),
            default_provider=default_provider,
        )

    async def list_topups(self, user_id: int) -> list[TopUpRecord]:
        rows = await self._topups.list_for_user(user_id)
        return [self._to_topup(row) for row in rows]

    async def list_transfers(self, user_id: int) -> list[PeerTransferRecord]:
        rows = await self._transfers.list_for_user(user_id)
        return [self._to_transfer(row) for row in rows]

    async def get_feed(self, user_id: Optional[int]) -> TransactionFeed:
        if user_id is None:
            return TransactionFeed()

        # Both reads share the request session, which cannot run them concurrently.
        topups = await self.list_topups(user_id)
        transfers = await self.list_transfers(user_id)
        logger.debug(
            "Loaded %d top-ups and %d transfers for user %s",
            len(topups),
            len(transfers),
            user_id,
        )

        return build_feed(
            normalize_all(topups, user_id, default_provider=self._default_provider),
            normalize_all(transfers, user_id, default_provider=self._default_provider),
        )

    @staticmethod
    def _to_topup(model: OnRampTransaction) -> TopUpRecord:
        return TopUpRecord(
            id=model.id,
            start_time=model.start_time,
            amount=model.amount,
            status=model.status,
            provider=model.provider,
        )

    @staticmethod
    def _to_transfer(model: P2PTransfer) -> PeerTransferRecord:
        return PeerTransferRecord(
            id=model.id,
            timestamp=model.timestamp,
            amount=model.amount,
            from_user_id=model.from_user_id,
            to_user_id=model.to_user_id,
            from_user_name=model.from_user.name if model.from_user else None,
            to_user_name=model.to_user.name if model.to_user else None,
        )
