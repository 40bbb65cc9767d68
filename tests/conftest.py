from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone
from typing import AsyncIterator, Optional

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from walletview.infrastructure.database import Base
from walletview.infrastructure.database import models

NOW = datetime(2026, 6, 15, 12, 0, tzinfo=timezone.utc)


def hours_ago(hours: float) -> datetime:
    return NOW - timedelta(hours=hours)


@pytest.fixture
async def engine(tmp_path):
    db_engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'walletview.db'}")
    async with db_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield db_engine
    await db_engine.dispose()


@pytest.fixture
async def session(engine) -> AsyncIterator[AsyncSession]:
    factory = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as db:
        yield db


async def add_user(session: AsyncSession, name: Optional[str] = None) -> models.User:
    user = models.User(name=name)
    session.add(user)
    await session.flush()
    return user


async def add_balance(session: AsyncSession, user: models.User, amount: int, locked: int = 0) -> models.Balance:
    balance = models.Balance(user_id=user.id, amount=amount, locked=locked)
    session.add(balance)
    await session.flush()
    return balance


async def add_topup(
    session: AsyncSession,
    user: models.User,
    amount: int,
    *,
    status: str = "Success",
    provider: Optional[str] = "HDFC Bank",
    start_time: datetime = NOW,
) -> models.OnRampTransaction:
    txn = models.OnRampTransaction(
        user_id=user.id,
        amount=amount,
        status=status,
        provider=provider,
        token=uuid.uuid4().hex,
        start_time=start_time,
    )
    session.add(txn)
    await session.flush()
    return txn


async def add_transfer(
    session: AsyncSession,
    sender: models.User,
    recipient: models.User,
    amount: int,
    *,
    timestamp: datetime = NOW,
) -> models.P2PTransfer:
    transfer = models.P2PTransfer(
        from_user=sender,
        to_user=recipient,
        amount=amount,
        timestamp=timestamp,
    )
    session.add(transfer)
    await session.flush()
    return transfer
