"""POST /clientes/{customer_id}/transacoes - Apply a credit or debit"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.exc import SQLAlchemyError

from ledger_gateway.api.routes.schemas import TransactionRequest, TransactionResponse
from ledger_gateway.api.dependencies import get_ledger_service, get_request_id
from ledger_gateway.services.ledger import LedgerService
from ledger_gateway.domain.exceptions import (
    CustomerNotFoundError,
    InsufficientFundsError,
    InvalidAttributeError,
)
from ledger_gateway.infrastructure.observability.metrics import record_transaction
from ledger_gateway.infrastructure.observability.logging import (
    log_transaction_applied,
    log_transaction_rejected,
)

router = APIRouter()

METRIC_TYPES = {"credit", "debit"}


@router.post("/clientes/{customer_id}/transacoes", response_model=TransactionResponse)
def create_transaction(
    customer_id: int,
    request_body: TransactionRequest,
    request: Request,
    ledger: LedgerService = Depends(get_ledger_service),
):
    """
    Apply a transaction to the customer's balance.

    Flow:
    1. Validate customer, type, description and amount
    2. Lock the customer row and compute the new balance
    3. Persist balance + transaction in one unit of work
    4. Return the balance and limit after the transaction

    Runs on the worker thread pool: waiting on the row lock never blocks the event loop.
    """
    start_time = time.time()
    request_id = get_request_id(request)
    transaction_type = request_body.transaction_type
    metric_type = transaction_type if transaction_type in METRIC_TYPES else "invalid"

    try:
        status = ledger.apply(
            customer_id=customer_id,
            transaction_type=transaction_type,
            description=request_body.descricao,
            amount=request_body.valor,
        )

    except CustomerNotFoundError as e:
        record_transaction(metric_type, applied=False, reason="customer_not_found")
        log_transaction_rejected(request_id, customer_id, "customer_not_found", str(e))
        raise HTTPException(status_code=404, detail=str(e))

    except InvalidAttributeError as e:
        record_transaction(metric_type, applied=False, reason="invalid_attribute")
        log_transaction_rejected(request_id, customer_id, "invalid_attribute", str(e))
        raise HTTPException(status_code=422, detail=str(e))

    except InsufficientFundsError as e:
        record_transaction(metric_type, applied=False, reason="insufficient_funds")
        log_transaction_rejected(request_id, customer_id, "insufficient_funds", str(e))
        raise HTTPException(status_code=422, detail=str(e))

    except SQLAlchemyError as e:
        logging.error(f"Store error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    # Record metrics and logs
    duration_ms = (time.time() - start_time) * 1000
    record_transaction(metric_type, applied=True)
    log_transaction_applied(
        request_id, customer_id, transaction_type, request_body.valor, status.balance, duration_ms
    )

    return TransactionResponse(limite=status.credit_limit, saldo=status.balance)
