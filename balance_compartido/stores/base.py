"""Interfaz de almacenamiento común a la base de datos y al modo demo."""

from typing import Any, ContextManager, Dict, List, Optional, Protocol
from uuid import UUID

from balance_compartido.models.debt import Debt
from balance_compartido.models.enums import DebtStatus, TransactionTipo
from balance_compartido.models.transaction import Transaction


class DebtUnitOfWork(Protocol):
    """
    Lectura y escrituras de una acción sobre una deuda.

    Todo lo escrito dentro de la unidad se aplica junto al salir del bloque
    sin error; si algo falla no queda ningún cambio.
    """

    def get_debt(self, debt_id: UUID, household_id: UUID) -> Optional[Debt]: ...

    def update_debt(self, debt: Debt, changes: Dict[str, Any]) -> Debt: ...

    def insert_transaction(self, values: Dict[str, Any]) -> Transaction: ...


class DebtStore(Protocol):
    def unit_of_work(self, debt_id: UUID) -> ContextManager[DebtUnitOfWork]:
        """Serializa las acciones sobre `debt_id` y las hace atómicas."""
        ...

    def get_debt(self, debt_id: UUID, household_id: UUID) -> Optional[Debt]: ...

    def list_debts(
        self, household_id: UUID, status: Optional[DebtStatus] = None
    ) -> List[Debt]: ...

    def create_debt(self, household_id: UUID, values: Dict[str, Any]) -> Debt: ...

    def update_debt(self, debt: Debt, changes: Dict[str, Any]) -> Debt: ...

    def delete_debt(self, debt: Debt) -> None: ...

    def list_transactions(
        self, household_id: UUID, tipo: Optional[TransactionTipo] = None
    ) -> List[Transaction]: ...
