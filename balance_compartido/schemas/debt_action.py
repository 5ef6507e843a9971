# balance_compartido/schemas/debt_action.py

import datetime as dt
from uuid import UUID
from pydantic import BaseModel
from typing import Optional

from balance_compartido.models.enums import DebtActionKind
from balance_compartido.schemas.debt import DebtRead
from balance_compartido.schemas.transaction import TransactionRead

class DebtActionRequest(BaseModel):
    debt_id: UUID
    action: DebtActionKind
    monto: float  # se valida en el servicio (> 0 y finito)
    date: dt.date
    persona: str
    metodo: Optional[str] = None
    nota: Optional[str] = None

class DebtActionResponse(BaseModel):
    message: str
    debt: DebtRead
    transaction: TransactionRead
