# balance_compartido/schemas/debt.py

from pydantic import BaseModel, ConfigDict, Field, field_validator
from uuid import UUID
from typing import Optional
from datetime import datetime

from balance_compartido.models.enums import DebtStatus

class DebtCreate(BaseModel):
    entity: str = Field(min_length=1)
    balance: float = Field(gt=0, le=5_000_000)
    monthly_payment: float = Field(gt=0, le=1_000_000)
    interest_rate: Optional[float] = Field(default=None, ge=0, le=100)
    status: DebtStatus = DebtStatus.activa

class DebtUpdate(BaseModel):
    # id y household_id llegan a veces desde el frontend; se ignoran
    model_config = ConfigDict(extra="ignore")

    entity: Optional[str] = Field(default=None, min_length=1)
    balance: Optional[float] = Field(default=None, ge=0, le=5_000_000)
    monthly_payment: Optional[float] = Field(default=None, ge=0, le=1_000_000)
    interest_rate: Optional[float] = Field(default=None, ge=0, le=100)
    status: Optional[DebtStatus] = None

    @field_validator("entity", "balance", "monthly_payment", "status")
    @classmethod
    def not_null(cls, value):
        # Solo interest_rate admite null explícito
        if value is None:
            raise ValueError("El campo no puede ser nulo")
        return value

class DebtRead(BaseModel):
    id: UUID
    household_id: UUID
    entity: str
    balance: float
    monthly_payment: float
    interest_rate: Optional[float] = None
    status: DebtStatus
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
