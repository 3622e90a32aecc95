"""Data access layer for ledger entities"""

from datetime import datetime
from typing import List, Optional
from sqlalchemy.orm import Query, Session
from ledger_gateway.infrastructure.database.models import Customer, Transaction
from ledger_gateway.domain.models import TransactionType


class CustomerRepository:
    """Repository for seeded customers"""

    def __init__(self, db: Session):
        self.db = db

    def locked_customer_query(self, customer_id: int) -> Query:
        """SELECT ... FOR UPDATE on one customer row"""
        return (
            self.db.query(Customer)
            .filter(Customer.id == customer_id)
            .with_for_update()
            .populate_existing()
        )

    def lock_for_update(self, customer_id: int) -> Optional[Customer]:
        """
        Read the customer row under an exclusive row lock.

        The lock is held until the enclosing unit of work commits or rolls
        back, so concurrent writers on the same customer queue up here.
        populate_existing() refreshes a row cached by a reused session.
        """
        return self.locked_customer_query(customer_id).first()

    def get(self, customer_id: int) -> Optional[Customer]:
        """Unlocked read"""
        return (
            self.db.query(Customer)
            .filter(Customer.id == customer_id)
            .populate_existing()
            .first()
        )

    def update_balance(self, customer: Customer, new_balance: int) -> None:
        """Write the new balance; caller must still hold the row lock"""
        customer.balance = new_balance
        self.db.flush()


class TransactionRepository:
    """Repository for the append-only transaction log"""

    def __init__(self, db: Session):
        self.db = db

    def insert(
        self,
        customer_id: int,
        amount: int,
        transaction_type: TransactionType,
        description: str,
        created_at: datetime,
    ) -> Transaction:
        """Append a transaction row"""
        db_transaction = Transaction(
            customer_id=customer_id,
            amount=amount,
            type=transaction_type.value,
            description=description,
            created_at=created_at,
        )
        self.db.add(db_transaction)
        self.db.flush()  # Get ID without committing
        return db_transaction

    def get_last_transactions(self, customer_id: int, limit: int = 10) -> List[Transaction]:
        """Fetch most recent transactions for a customer, newest first"""
        return (
            self.db.query(Transaction)
            .filter(Transaction.customer_id == customer_id)
            .order_by(Transaction.created_at.desc(), Transaction.id.desc())
            .limit(limit)
            .all()
        )
