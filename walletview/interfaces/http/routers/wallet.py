"""JSON endpoints exposing the same data as the rendered pages."""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from walletview.core.config import get_settings
from walletview.core.exceptions import InvalidTransactionError
from walletview.interfaces.http.deps import get_current_user_id, get_db_session
from walletview.modules.balances import BalanceService
from walletview.modules.transactions import TransactionService
from walletview.schemas import BalanceResponse, TransactionFeedResponse, UnifiedTransactionResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/balance", response_model=BalanceResponse, summary="Current wallet balance")
async def get_balance(
    user_id: Optional[int] = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db_session),
) -> BalanceResponse:
    try:
        snapshot = await BalanceService.with_session(db).get_balance(user_id)
    except SQLAlchemyError as exc:
        logger.exception("Failed to read balance for user %s", user_id)
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Balance unavailable") from exc
    return BalanceResponse(
        amount=snapshot.amount,
        locked=snapshot.locked,
        total=snapshot.total,
        available_percentage=snapshot.available_percentage,
    )


@router.get("/transactions", response_model=TransactionFeedResponse, summary="Unified transaction history")
async def list_transactions(
    user_id: Optional[int] = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db_session),
) -> TransactionFeedResponse:
    service = TransactionService.with_session(db, default_provider=get_settings().display.default_provider)
    try:
        feed = await service.get_feed(user_id)
    except (SQLAlchemyError, InvalidTransactionError) as exc:
        logger.exception("Failed to read transactions for user %s", user_id)
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Transactions unavailable") from exc
    return TransactionFeedResponse(
        total_settled=feed.total_settled,
        pending_count=feed.pending_count,
        total_count=feed.total_count,
        transactions=[
            UnifiedTransactionResponse(
                time=txn.time,
                amount=txn.amount,
                direction=txn.direction.value,
                status=txn.status,
                counterparty_label=txn.counterparty_label,
                activity_label=txn.activity_label,
                source=txn.source.value,
            )
            for txn in feed
        ],
    )
