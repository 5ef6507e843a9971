# balance_compartido/stores/demo.py
"""
Almacén en memoria para el modo demo (sin hogar autenticado).

Implementa la misma interfaz que `SqlDebtStore`, de modo que las acciones de
deuda pasan por exactamente el mismo servicio en ambos modos.
"""

import threading
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Tuple
from uuid import UUID

from balance_compartido.core.exceptions import NotFoundError
from balance_compartido.models.debt import Debt
from balance_compartido.models.enums import DebtStatus, TransactionTipo
from balance_compartido.models.transaction import Transaction

DEMO_HOUSEHOLD_ID = UUID("00000000-0000-0000-0000-000000000001")

DEMO_DEBTS = [
    {"entity": "Hipoteca", "balance": 120000, "monthly_payment": 2500, "interest_rate": 6.5},
    {"entity": "Auto familiar", "balance": 18000, "monthly_payment": 950, "interest_rate": 5.2},
    {"entity": "Tarjeta viajes", "balance": 4200, "monthly_payment": 350, "interest_rate": 28},
]


def _copy_debt(debt: Debt) -> Debt:
    return Debt(**debt.model_dump())


class DemoUnitOfWork:
    """Acumula las escrituras; el almacén las aplica al cerrar la unidad."""

    def __init__(self, store: "DemoDebtStore"):
        self._store = store
        self.debt_changes: List[Tuple[UUID, Dict[str, Any]]] = []
        self.transactions: List[Transaction] = []

    def get_debt(self, debt_id: UUID, household_id: UUID) -> Optional[Debt]:
        return self._store.get_debt(debt_id, household_id)

    def update_debt(self, debt: Debt, changes: Dict[str, Any]) -> Debt:
        for field, value in changes.items():
            setattr(debt, field, value)
        self.debt_changes.append((debt.id, dict(changes)))
        return debt

    def insert_transaction(self, values: Dict[str, Any]) -> Transaction:
        tx = Transaction(**values)
        self.transactions.append(tx)
        return tx


class DemoDebtStore:
    def __init__(self, debts: Optional[List[Debt]] = None):
        self._debts: Dict[UUID, Debt] = {debt.id: debt for debt in debts or []}
        self._transactions: List[Transaction] = []
        self._guard = threading.Lock()
        # Reentrante: un borrado dentro de la misma unidad no se bloquea a sí mismo
        self._debt_locks: Dict[UUID, threading.RLock] = {debt_id: threading.RLock() for debt_id in self._debts}

    @classmethod
    def seeded(cls) -> "DemoDebtStore":
        return cls(
            [
                Debt(household_id=DEMO_HOUSEHOLD_ID, status=DebtStatus.activa, **values)
                for values in DEMO_DEBTS
            ]
        )

    @contextmanager
    def unit_of_work(self, debt_id: UUID) -> Iterator[DemoUnitOfWork]:
        with self._guard:
            # Ids desconocidos no registran lock; get_debt devolverá None
            debt_lock = self._debt_locks.get(debt_id) or threading.RLock()
        with debt_lock:
            unit = DemoUnitOfWork(self)
            yield unit
            # Solo se llega aquí si el bloque terminó sin excepción
            with self._guard:
                if any(changed_id not in self._debts for changed_id, _ in unit.debt_changes):
                    raise NotFoundError("Deuda no encontrada")
                for changed_id, changes in unit.debt_changes:
                    stored = self._debts[changed_id]
                    for field, value in changes.items():
                        setattr(stored, field, value)
                self._transactions.extend(unit.transactions)

    def get_debt(self, debt_id: UUID, household_id: UUID) -> Optional[Debt]:
        with self._guard:
            debt = self._debts.get(debt_id)
            if debt is None or debt.household_id != household_id:
                return None
            return _copy_debt(debt)

    def list_debts(self, household_id: UUID, status: Optional[DebtStatus] = None) -> List[Debt]:
        with self._guard:
            return [
                _copy_debt(debt)
                for debt in self._debts.values()
                if debt.household_id == household_id and (status is None or debt.status == status)
            ]

    def create_debt(self, household_id: UUID, values: Dict[str, Any]) -> Debt:
        debt = Debt(**values, household_id=household_id)
        with self._guard:
            self._debts[debt.id] = debt
            self._debt_locks[debt.id] = threading.RLock()
        return _copy_debt(debt)

    def _lock_for(self, debt_id: UUID) -> threading.RLock:
        with self._guard:
            return self._debt_locks.get(debt_id) or threading.RLock()

    def update_debt(self, debt: Debt, changes: Dict[str, Any]) -> Debt:
        # Espera a que termine cualquier acción en curso sobre la deuda
        with self._lock_for(debt.id), self._guard:
            stored = self._debts.get(debt.id)
            if stored is None:
                raise NotFoundError("Deuda no encontrada")
            for field, value in changes.items():
                setattr(stored, field, value)
            return _copy_debt(stored)

    def delete_debt(self, debt: Debt) -> None:
        with self._lock_for(debt.id), self._guard:
            self._debts.pop(debt.id, None)
            self._debt_locks.pop(debt.id, None)

    def list_transactions(
        self, household_id: UUID, tipo: Optional[TransactionTipo] = None
    ) -> List[Transaction]:
        with self._guard:
            rows = [
                tx
                for tx in self._transactions
                if tx.household_id == household_id and (tipo is None or tx.tipo == tipo)
            ]
        return sorted(rows, key=lambda tx: (tx.date, tx.created_at), reverse=True)


demo_store = DemoDebtStore.seeded()


def get_demo_store() -> DemoDebtStore:
    return demo_store
