import datetime as dt
from uuid import UUID
from pydantic import BaseModel, ConfigDict
from typing import Optional

from balance_compartido.models.enums import TransactionTipo

class TransactionRead(BaseModel):
    id: UUID
    household_id: UUID
    date: dt.date
    category: str
    tipo: TransactionTipo
    monto: float
    persona: str
    metodo: Optional[str] = None
    nota: Optional[str] = None
    created_at: Optional[dt.datetime] = None

    model_config = ConfigDict(from_attributes=True)
