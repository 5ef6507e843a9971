# balance_compartido/api/debts.py

import logging
from fastapi import APIRouter, Depends, HTTPException, status
from uuid import UUID
from typing import List, Optional

from balance_compartido.core.exceptions import NotFoundError, ValidationError
from balance_compartido.core.security import HouseholdScope, get_household_scope
from balance_compartido.models.enums import DebtStatus
from balance_compartido.schemas.debt import DebtCreate, DebtRead, DebtUpdate
from balance_compartido.schemas.debt_action import DebtActionRequest, DebtActionResponse
from balance_compartido.schemas.transaction import TransactionRead
from balance_compartido.services.debt_actions import apply_debt_action

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/debts", tags=["debts"])


def _check_paid_invariant(balance: float, monthly_payment: float, debt_status: Optional[DebtStatus]):
    if debt_status == DebtStatus.pagada and (balance != 0 or monthly_payment != 0):
        raise HTTPException(400, "Una deuda pagada debe tener saldo y cuota en 0.")


@router.get("", response_model=List[DebtRead])
@router.get("/", response_model=List[DebtRead])
def get_debts(scope: HouseholdScope = Depends(get_household_scope)):
    return scope.store.list_debts(scope.household_id)


@router.get("/active", response_model=List[DebtRead])
def get_active_debts(scope: HouseholdScope = Depends(get_household_scope)):
    return scope.store.list_debts(scope.household_id, status=DebtStatus.activa)


@router.post("", response_model=DebtRead, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=DebtRead, status_code=status.HTTP_201_CREATED)
def create_debt(debt_data: DebtCreate, scope: HouseholdScope = Depends(get_household_scope)):
    _check_paid_invariant(debt_data.balance, debt_data.monthly_payment, debt_data.status)
    return scope.store.create_debt(scope.household_id, debt_data.model_dump())


@router.post("/action", response_model=DebtActionResponse)
def perform_debt_action(
    action_data: DebtActionRequest,
    scope: HouseholdScope = Depends(get_household_scope),
):
    try:
        result = apply_debt_action(scope.store, scope.household_id, action_data)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    return DebtActionResponse(
        message="Acción de deuda realizada con éxito",
        debt=DebtRead.model_validate(result.debt),
        transaction=TransactionRead.model_validate(result.transaction),
    )


@router.patch("/{debt_id}", response_model=DebtRead)
def update_debt(
    debt_id: UUID,
    debt_data: DebtUpdate,
    scope: HouseholdScope = Depends(get_household_scope),
):
    debt = scope.store.get_debt(debt_id, scope.household_id)
    if not debt:
        raise HTTPException(status_code=404, detail="Deuda no encontrada")

    changes = debt_data.model_dump(exclude_unset=True)
    _check_paid_invariant(
        changes.get("balance", debt.balance),
        changes.get("monthly_payment", debt.monthly_payment),
        changes.get("status", debt.status),
    )
    try:
        return scope.store.update_debt(debt, changes)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))


@router.delete("/{debt_id}")
def delete_debt(debt_id: UUID, scope: HouseholdScope = Depends(get_household_scope)):
    debt = scope.store.get_debt(debt_id, scope.household_id)
    if not debt:
        raise HTTPException(status_code=404, detail="Deuda no encontrada")

    scope.store.delete_debt(debt)
    logger.info("Deuda %s eliminada", debt_id)
    return {"success": True}
