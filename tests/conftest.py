"""Fixtures compartidas: base SQLite en memoria, almacén demo y cliente HTTP."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import balance_compartido.models  # noqa: F401  registra las tablas
from balance_compartido.core.security import create_access_token
from balance_compartido.database import get_session
from balance_compartido.main import app
from balance_compartido.models import Debt, DebtStatus, Household
from balance_compartido.stores.demo import DemoDebtStore, get_demo_store


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def household(session) -> Household:
    household = Household(name="Casa de prueba")
    session.add(household)
    session.commit()
    session.refresh(household)
    return household


@pytest.fixture
def make_debt(session, household):
    """Crea una deuda persistida; los campos se pueden sobreescribir."""

    def _make_debt(**overrides) -> Debt:
        values = {
            "household_id": household.id,
            "entity": "Hipoteca",
            "balance": 1000.0,
            "monthly_payment": 100.0,
            "interest_rate": 12.0,
            "status": DebtStatus.activa,
        }
        values.update(overrides)
        debt = Debt(**values)
        session.add(debt)
        session.commit()
        session.refresh(debt)
        return debt

    return _make_debt


@pytest.fixture
def demo_store() -> DemoDebtStore:
    return DemoDebtStore.seeded()


@pytest.fixture
def client(session, demo_store):
    app.dependency_overrides[get_session] = lambda: session
    app.dependency_overrides[get_demo_store] = lambda: demo_store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(household):
    return {"Authorization": f"Bearer {create_access_token(household.id)}"}
