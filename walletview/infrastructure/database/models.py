"""SQLAlchemy ORM models for the wallet tables this service reads."""
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from walletview.infrastructure.database.base import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100))
    email = Column(String(100), unique=True)
    number = Column(String(20), unique=True)

    balance = relationship("Balance", back_populates="user", uselist=False)
    on_ramp_transactions = relationship("OnRampTransaction", back_populates="user")
    sent_transfers = relationship(
        "P2PTransfer",
        back_populates="from_user",
        foreign_keys="P2PTransfer.from_user_id",
    )
    received_transfers = relationship(
        "P2PTransfer",
        back_populates="to_user",
        foreign_keys="P2PTransfer.to_user_id",
    )


class Balance(Base):
    __tablename__ = "balances"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, unique=True)
    amount = Column(Integer, nullable=False, default=0)
    locked = Column(Integer, nullable=False, default=0)

    user = relationship("User", back_populates="balance")


class OnRampTransaction(Base):
    __tablename__ = "on_ramp_transactions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    status = Column(String(20), nullable=False, default="Processing")  # Success, Failure, Processing
    token = Column(String(100), unique=True, nullable=False)
    provider = Column(String(100))
    amount = Column(Integer, nullable=False)
    start_time = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    user = relationship("User", back_populates="on_ramp_transactions")


class P2PTransfer(Base):
    __tablename__ = "p2p_transfers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    amount = Column(Integer, nullable=False)
    timestamp = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    from_user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    to_user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    from_user = relationship("User", back_populates="sent_transfers", foreign_keys=[from_user_id])
    to_user = relationship("User", back_populates="received_transfers", foreign_keys=[to_user_id])
