"""Dependency injection for FastAPI endpoints"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session
from ledger_gateway.infrastructure.database.session import get_db
from ledger_gateway.services.ledger import LedgerService


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_ledger_service(db: Session = Depends(get_db)) -> LedgerService:
    """Provide a ledger service bound to the request's session"""
    return LedgerService(db)
