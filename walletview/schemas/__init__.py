"""Pydantic schemas used across the project."""
from datetime import datetime

from pydantic import BaseModel, Field


class BalanceResponse(BaseModel):
    amount: int = Field(..., description="Available balance in minor units")
    locked: int = Field(..., description="Locked balance in minor units")
    total: int
    available_percentage: float


class UnifiedTransactionResponse(BaseModel):
    time: datetime
    amount: int = Field(..., ge=0)
    direction: str
    status: str
    counterparty_label: str
    activity_label: str
    source: str


class TransactionFeedResponse(BaseModel):
    total_settled: int
    pending_count: int
    total_count: int
    transactions: list[UnifiedTransactionResponse]
