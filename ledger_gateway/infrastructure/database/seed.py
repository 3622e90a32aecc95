"""Schema creation and fixed customer seed data"""

import logging
from typing import List, Tuple
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session
from ledger_gateway.infrastructure.database.models import Base, Customer

logger = logging.getLogger(__name__)

# (id, name, credit_limit); every customer starts at balance 0
SEED_CUSTOMERS: List[Tuple[int, str, int]] = [
    (1, "o barato sai caro", 100_000),
    (2, "zan corp ltda", 80_000),
    (3, "les cruders", 1_000_000),
    (4, "padaria joia de cocaia", 10_000_000),
    (5, "kid mais", 500_000),
]


def create_schema(engine: Engine) -> None:
    """Create customer and transaction tables if missing"""
    Base.metadata.create_all(bind=engine)


def seed_customers(db: Session, customers: List[Tuple[int, str, int]] = SEED_CUSTOMERS) -> int:
    """
    Insert seeded customers that are not present yet.

    Existing rows are left untouched so balances survive restarts.

    Returns:
        Number of customers inserted
    """
    existing = {row.id for row in db.query(Customer.id).all()}
    inserted = 0

    for customer_id, name, credit_limit in customers:
        if customer_id in existing:
            continue
        db.add(Customer(id=customer_id, name=name, credit_limit=credit_limit, balance=0))
        inserted += 1

    db.commit()
    logger.info("Customers seeded", extra={"inserted": inserted, "total": len(customers)})
    return inserted
