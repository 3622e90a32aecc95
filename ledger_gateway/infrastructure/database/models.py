"""SQLAlchemy ORM models matching db/schema.sql"""

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy.sql import func

Base = declarative_base()


class Customer(Base):
    """Seeded customer account with a bounded overdraft"""

    __tablename__ = "customer"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(Text, nullable=False)
    credit_limit = Column(Integer, nullable=False)
    balance = Column(Integer, nullable=False, default=0)

    transactions = relationship("Transaction", back_populates="customer")

    __table_args__ = (
        CheckConstraint("credit_limit >= 0", name="ck_customer_credit_limit_non_negative"),
    )


class Transaction(Base):
    """Append-only ledger movement"""

    __tablename__ = "transaction"

    id = Column(Integer, primary_key=True, autoincrement=True)
    customer_id = Column(Integer, ForeignKey("customer.id"), nullable=False)
    amount = Column(Integer, nullable=False)
    type = Column(String(6), nullable=False)
    description = Column(String(10), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    customer = relationship("Customer", back_populates="transactions")

    __table_args__ = (
        CheckConstraint("amount > 0", name="ck_transaction_amount_positive"),
        CheckConstraint("type IN ('credit', 'debit')", name="ck_transaction_type"),
        # History reads: latest rows per customer
        Index("ix_transaction_customer_created", "customer_id", "created_at", "id"),
    )
