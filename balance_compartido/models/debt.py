# balance_compartido/models/debt.py

from sqlmodel import SQLModel, Field
from uuid import uuid4, UUID
from typing import Optional
from datetime import datetime

from balance_compartido.models.enums import DebtStatus

class Debt(SQLModel, table=True):
    __tablename__ = "debts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    household_id: UUID = Field(foreign_key="household.id", index=True)
    entity: str  # Ej: "Hipoteca", "Tarjeta viajes"
    balance: float  # Saldo pendiente de capital
    monthly_payment: float  # Cuota mensual pactada
    interest_rate: Optional[float] = None  # En porcentaje anual
    status: DebtStatus = Field(default=DebtStatus.activa)
    created_at: datetime = Field(default_factory=datetime.utcnow)
