"""SQLAlchemy ORM models."""
from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from account_server.infrastructure.database.base import Base


class AccountUser(Base):
    __tablename__ = "account_users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    accounts = relationship("Account", back_populates="account_user")


class Account(Base):
    __tablename__ = "accounts"
    __table_args__ = (
        CheckConstraint("balance >= 0", name="ck_accounts_non_negative_balance"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    account_user_id = Column(Integer, ForeignKey("account_users.id"), nullable=False, index=True)
    account_number = Column(String(10), unique=True, nullable=False, index=True)
    account_status = Column(String(20), nullable=False, default="IN_USE")  # IN_USE, UNREGISTERED
    balance = Column(Integer, nullable=False, default=0)
    registered_at = Column(DateTime(timezone=True))
    unregistered_at = Column(DateTime(timezone=True))
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    account_user = relationship("AccountUser", back_populates="accounts")
    transactions = relationship("Transaction", back_populates="account")


class Transaction(Base):
    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    transaction_id = Column(String(32), unique=True, nullable=False, index=True)
    transaction_type = Column(String(10), nullable=False)  # USE, CANCEL
    transaction_result_type = Column(String(1), nullable=False)  # S, F
    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False, index=True)
    amount = Column(Integer, nullable=False)
    balance_snapshot = Column(Integer, nullable=False)
    transacted_at = Column(DateTime(timezone=True), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    account = relationship("Account", back_populates="transactions")
