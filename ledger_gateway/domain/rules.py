"""Ledger rules - validation and balance arithmetic for customer transactions"""

from typing import Optional

from ledger_gateway.domain.exceptions import (
    CustomerNotFoundError,
    InsufficientFundsError,
    InvalidAttributeError,
)
from ledger_gateway.domain.models import TransactionType


def validate_customer_id(customer_id: int, first_id: int, last_id: int) -> None:
    """
    Cheap pre-lock existence check against the seeded id range.

    The locked read in the service stays authoritative; this only lets
    unknown ids fail before any lock or write.
    """
    if not first_id <= customer_id <= last_id:
        raise CustomerNotFoundError(customer_id)


def parse_transaction_type(value: Optional[str]) -> TransactionType:
    """Accept exactly "credit" or "debit"; None means the caller sent no known type"""
    try:
        return TransactionType(value)
    except ValueError:
        raise InvalidAttributeError("type", f"Invalid transaction type: {value!r}") from None


def validate_description(description: str, max_length: int) -> None:
    """Description must be non-blank and at most max_length characters"""
    if not description or description.isspace():
        raise InvalidAttributeError("description", "Description must not be blank")

    if len(description) > max_length:
        raise InvalidAttributeError(
            "description", f"Description longer than {max_length} characters"
        )


def validate_amount(amount: int) -> None:
    """Sign of the movement comes from the type, so amounts are strictly positive"""
    if amount <= 0:
        raise InvalidAttributeError("amount", "Amount must be a positive integer")


def calculate_new_balance(
    balance: int,
    credit_limit: int,
    transaction_type: TransactionType,
    amount: int,
) -> int:
    """
    Compute the balance after applying a transaction.

    Rules:
    - credit: balance + amount, no upper bound
    - debit: balance - amount, allowed while the result stays >= -credit_limit

    Example:
        balance=500, credit_limit=1000, debit 1400 → -900 (1400 ≤ 1500)
        balance=-900, credit_limit=1000, debit 200 → InsufficientFundsError (200 > 100)

    Raises:
        InsufficientFundsError: Debit exceeds balance + credit_limit
    """
    if transaction_type is TransactionType.CREDIT:
        return balance + amount

    available = balance + credit_limit
    if amount > available:
        raise InsufficientFundsError(
            f"Debit of {amount} exceeds available funds of {available}"
        )

    return balance - amount
