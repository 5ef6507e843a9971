from fastapi import APIRouter, Depends
from typing import List, Optional

from balance_compartido.core.security import HouseholdScope, get_household_scope
from balance_compartido.models.enums import TransactionTipo
from balance_compartido.schemas.transaction import TransactionRead

router = APIRouter(prefix="/transactions", tags=["transactions"])

@router.get("", response_model=List[TransactionRead])
@router.get("/", response_model=List[TransactionRead])
def get_transactions(
    tipo: Optional[TransactionTipo] = None,
    scope: HouseholdScope = Depends(get_household_scope),
):
    return scope.store.list_transactions(scope.household_id, tipo=tipo)
