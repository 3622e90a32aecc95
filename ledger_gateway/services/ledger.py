"""Ledger service - validated, row-locked balance mutations and statement reads"""

import logging
from typing import Callable, Optional
from datetime import datetime
from sqlalchemy.orm import Session

from ledger_gateway.config import settings
from ledger_gateway.domain.exceptions import CustomerNotFoundError
from ledger_gateway.domain.models import (
    CustomerStatement,
    CustomerStatus,
    Transaction,
    TransactionType,
)
from ledger_gateway.domain.rules import (
    calculate_new_balance,
    parse_transaction_type,
    validate_amount,
    validate_customer_id,
    validate_description,
)
from ledger_gateway.infrastructure.database.repositories import CustomerRepository, TransactionRepository
from ledger_gateway.infrastructure.observability.metrics import row_lock_wait_histogram, history_counter
from ledger_gateway.utils.date_utils import utc_now

logger = logging.getLogger(__name__)


class LedgerService:
    """
    Applies transactions to customer balances and serves statements.

    Every apply() is one unit of work on the given session:
    lock customer row → compute balance → write balance → insert transaction → commit.
    The session's transaction boundary is owned here; the caller only
    provides a live session.
    """

    def __init__(
        self,
        db: Session,
        clock: Callable[[], datetime] = utc_now,
        history_limit: int | None = None,
        description_max_length: int | None = None,
    ):
        self.db = db
        self.clock = clock
        self.history_limit = settings.history_limit if history_limit is None else history_limit
        self.description_max_length = (
            settings.description_max_length if description_max_length is None else description_max_length
        )
        self.customers = CustomerRepository(db)
        self.transactions = TransactionRepository(db)

    def apply(
        self,
        customer_id: int,
        transaction_type: Optional[str],
        description: str,
        amount: int,
    ) -> CustomerStatus:
        """
        Validate and apply a credit or debit.

        Validation runs before any lock or write, in order:
        customer id range, type, description, amount.

        Raises:
            CustomerNotFoundError: Unknown customer (range check or locked read)
            InvalidAttributeError: Bad type, description or amount
            InsufficientFundsError: Debit would exceed balance + credit limit
        """
        validate_customer_id(customer_id, settings.first_customer_id, settings.last_customer_id)
        txn_type = parse_transaction_type(transaction_type)
        validate_description(description, self.description_max_length)
        validate_amount(amount)

        try:
            with row_lock_wait_histogram.time():
                customer = self.customers.lock_for_update(customer_id)

            if customer is None:
                raise CustomerNotFoundError(customer_id)

            new_balance = calculate_new_balance(
                customer.balance, customer.credit_limit, txn_type, amount
            )

            self.customers.update_balance(customer, new_balance)
            self.transactions.insert(
                customer_id=customer_id,
                amount=amount,
                transaction_type=txn_type,
                description=description,
                created_at=self.clock(),
            )
            credit_limit = customer.credit_limit

            self.db.commit()

        except Exception:
            # Releases the row lock and discards the balance write with the insert
            self.db.rollback()
            raise

        logger.debug(
            "balance_updated",
            extra={"customer_id": customer_id, "balance": new_balance},
        )
        return CustomerStatus(balance=new_balance, credit_limit=credit_limit)

    def history(self, customer_id: int) -> CustomerStatement:
        """
        Read balance, limit and the latest transactions without locking.

        A concurrently running apply() may or may not be reflected; the
        statement is a snapshot, not a linearizable read.

        Raises:
            CustomerNotFoundError: Unknown customer
        """
        validate_customer_id(customer_id, settings.first_customer_id, settings.last_customer_id)

        try:
            customer = self.customers.get(customer_id)
            if customer is None:
                raise CustomerNotFoundError(customer_id)

            rows = self.transactions.get_last_transactions(customer_id, limit=self.history_limit)

            statement = CustomerStatement(
                customer_id=customer.id,
                balance=customer.balance,
                credit_limit=customer.credit_limit,
                as_of=self.clock(),
                transactions=[
                    Transaction(
                        id=row.id,
                        customer_id=row.customer_id,
                        amount=row.amount,
                        type=TransactionType(row.type),
                        description=row.description,
                        created_at=row.created_at,
                    )
                    for row in rows
                ],
            )
        finally:
            # End the read-only unit of work; the snapshot is already detached
            self.db.rollback()

        history_counter.inc()
        return statement
