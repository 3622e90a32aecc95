"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class CustomerNotFoundError(DomainException):
    """Customer id is not part of the seeded customer set"""

    def __init__(self, customer_id: int):
        super().__init__(f"Customer {customer_id} not found")
        self.customer_id = customer_id


class InvalidAttributeError(DomainException):
    """Transaction request violates a field-level constraint"""

    def __init__(self, field: str, message: str | None = None):
        super().__init__(message or f"Invalid {field}")
        self.field = field


class InsufficientFundsError(DomainException):
    """Debit would push the balance below the customer's credit limit"""

    pass
