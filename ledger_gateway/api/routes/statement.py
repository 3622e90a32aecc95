"""GET /clientes/{customer_id}/extrato - Balance and latest transactions"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.exc import SQLAlchemyError

from ledger_gateway.api.routes.schemas import (
    BalanceSchema,
    StatementResponse,
    StatementTransaction,
    WIRE_TYPE_CODES,
)
from ledger_gateway.api.dependencies import get_ledger_service, get_request_id
from ledger_gateway.services.ledger import LedgerService
from ledger_gateway.domain.exceptions import CustomerNotFoundError
from ledger_gateway.utils.date_utils import to_calendar_date

router = APIRouter()


@router.get("/clientes/{customer_id}/extrato", response_model=StatementResponse)
def get_statement(
    customer_id: int,
    request: Request,
    ledger: LedgerService = Depends(get_ledger_service),
):
    """
    Retrieve the customer's balance with the last 10 transactions.

    Returns:
        Balance block stamped with today's date and transactions newest first
    """
    try:
        statement = ledger.history(customer_id)
    except CustomerNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except SQLAlchemyError as e:
        logging.error(f"Store error: {e}", extra={"request_id": get_request_id(request)})
        raise HTTPException(status_code=500, detail="Internal server error")

    transactions = [
        StatementTransaction(
            valor=t.amount,
            tipo=WIRE_TYPE_CODES[t.type.value],
            descricao=t.description,
            realizada_em=to_calendar_date(t.created_at),
        )
        for t in statement.transactions
    ]

    return StatementResponse(
        saldo=BalanceSchema(
            total=statement.balance,
            limite=statement.credit_limit,
            data_extrato=to_calendar_date(statement.as_of),
        ),
        ultimas_transacoes=transactions,
    )
