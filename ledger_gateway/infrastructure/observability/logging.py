"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from ledger_gateway.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_transaction_applied(
    request_id: str,
    customer_id: int,
    transaction_type: str,
    amount: int,
    balance: int,
    duration_ms: float,
) -> None:
    """Log structured outcome of an applied transaction"""
    logging.info(
        "Transaction applied",
        extra={
            "request_id": request_id,
            "customer_id": customer_id,
            "step": "transaction_applied",
            "transaction_type": transaction_type,
            "amount": amount,
            "balance": balance,
            "duration_ms": duration_ms,
        },
    )


def log_transaction_rejected(
    request_id: str,
    customer_id: int,
    reason: str,
    detail: str,
) -> None:
    """Log a transaction refused by validation or the overdraft rule"""
    logging.warning(
        "Transaction rejected",
        extra={
            "request_id": request_id,
            "customer_id": customer_id,
            "step": "transaction_rejected",
            "reason": reason,
            "detail": detail,
        },
    )
