# balance_compartido/models/transaction.py

import datetime as dt
from sqlmodel import SQLModel, Field
from uuid import uuid4, UUID
from typing import Optional

from balance_compartido.models.enums import TransactionTipo

class Transaction(SQLModel, table=True):
    __tablename__ = "transactions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    household_id: UUID = Field(foreign_key="household.id", index=True)
    date: dt.date
    category: str  # En pagos de deuda: la entidad acreedora
    tipo: TransactionTipo
    monto: float
    persona: str
    metodo: Optional[str] = None
    nota: Optional[str] = None
    created_at: dt.datetime = Field(default_factory=dt.datetime.utcnow)
