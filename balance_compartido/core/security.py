from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID
from jose import JWTError, jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlmodel import Session

from balance_compartido.core import config
from balance_compartido.database import get_session
from balance_compartido.stores.base import DebtStore
from balance_compartido.stores.demo import DEMO_HOUSEHOLD_ID, DemoDebtStore, get_demo_store
from balance_compartido.stores.sql import SqlDebtStore

# Sin token no es error: el request cae al modo demo si está habilitado
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass
class HouseholdScope:
    household_id: UUID
    store: DebtStore


def create_access_token(household_id: UUID, expires_delta: Optional[timedelta] = None) -> str:
    expire = datetime.utcnow() + (expires_delta or timedelta(minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode = {"household_id": str(household_id), "exp": expire}
    return jwt.encode(to_encode, config.SECRET_KEY, algorithm=config.ALGORITHM)


def get_household_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[UUID]:
    if credentials is None:
        return None
    try:
        payload = jwt.decode(credentials.credentials, config.SECRET_KEY, algorithms=[config.ALGORITHM])
        household_id_str: Optional[str] = payload.get("household_id")
        if household_id_str is None:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Token inválido")
        return UUID(household_id_str)
    except (JWTError, ValueError):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Token inválido")


def get_household_scope(
    household_id: Optional[UUID] = Depends(get_household_id),
    session: Session = Depends(get_session),
    demo_store: DemoDebtStore = Depends(get_demo_store),
) -> HouseholdScope:
    if household_id is not None:
        return HouseholdScope(household_id=household_id, store=SqlDebtStore(session))

    if not config.DEMO_MODE:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No se encontró el hogar")

    return HouseholdScope(household_id=DEMO_HOUSEHOLD_ID, store=demo_store)
