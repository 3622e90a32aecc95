"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List


class TransactionType(str, Enum):
    """Direction of a ledger movement; the amount itself is always positive"""

    CREDIT = "credit"
    DEBIT = "debit"


@dataclass
class Transaction:
    """Recorded ledger movement"""

    id: int
    customer_id: int
    amount: int
    type: TransactionType
    description: str
    created_at: datetime


@dataclass
class CustomerStatus:
    """Balance and limit right after a transaction was applied"""

    balance: int
    credit_limit: int


@dataclass
class CustomerStatement:
    """Best-effort snapshot of a customer's balance and latest transactions"""

    customer_id: int
    balance: int
    credit_limit: int
    as_of: datetime
    transactions: List[Transaction] = field(default_factory=list)
