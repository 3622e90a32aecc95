"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field, StrictInt
from datetime import date
from typing import List, Optional

# Single-letter wire codes used by clients
WIRE_TYPE_NAMES = {"c": "credit", "d": "debit"}
WIRE_TYPE_CODES = {name: code for code, name in WIRE_TYPE_NAMES.items()}


class TransactionRequest(BaseModel):
    """Request body for POST /clientes/{id}/transacoes"""

    # Strict: floats, numeric strings and booleans are not amounts
    valor: StrictInt = Field(..., description="Amount in cents")
    tipo: str = Field(..., description="'c' for credit, 'd' for debit")
    descricao: str = Field(..., description="Short description, 1-10 characters")

    @property
    def transaction_type(self) -> Optional[str]:
        """Core type name, or None for codes other than 'c'/'d' (rejected by the ledger)"""
        return WIRE_TYPE_NAMES.get(self.tipo)


class TransactionResponse(BaseModel):
    """Response for POST /clientes/{id}/transacoes"""

    limite: int
    saldo: int


class BalanceSchema(BaseModel):
    """Balance block of a statement"""

    total: int
    limite: int
    data_extrato: date


class StatementTransaction(BaseModel):
    """Single transaction in a statement"""

    valor: int
    tipo: str
    descricao: str
    realizada_em: date


class StatementResponse(BaseModel):
    """Response for GET /clientes/{id}/extrato"""

    saldo: BalanceSchema
    ultimas_transacoes: List[StatementTransaction]
