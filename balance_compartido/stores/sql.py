# balance_compartido/stores/sql.py

from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional
from uuid import UUID

from sqlmodel import Session, select

from balance_compartido.models.debt import Debt
from balance_compartido.models.enums import DebtStatus, TransactionTipo
from balance_compartido.models.transaction import Transaction


class SqlUnitOfWork:
    def __init__(self, session: Session):
        self.session = session
        self.debt: Optional[Debt] = None
        self.transaction: Optional[Transaction] = None

    def get_debt(self, debt_id: UUID, household_id: UUID) -> Optional[Debt]:
        # Bloquea la fila hasta el commit: dos pagos simultáneos no leen el mismo saldo
        return self.session.exec(
            select(Debt)
            .where(Debt.id == debt_id, Debt.household_id == household_id)
            .with_for_update()
        ).first()

    def update_debt(self, debt: Debt, changes: Dict[str, Any]) -> Debt:
        for field, value in changes.items():
            setattr(debt, field, value)
        self.session.add(debt)
        self.debt = debt
        return debt

    def insert_transaction(self, values: Dict[str, Any]) -> Transaction:
        tx = Transaction(**values)
        self.session.add(tx)
        self.transaction = tx
        return tx


class SqlDebtStore:
    def __init__(self, session: Session):
        self.session = session

    @contextmanager
    def unit_of_work(self, debt_id: UUID) -> Iterator[SqlUnitOfWork]:
        unit = SqlUnitOfWork(self.session)
        try:
            yield unit
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        if unit.debt is not None:
            self.session.refresh(unit.debt)
        if unit.transaction is not None:
            self.session.refresh(unit.transaction)

    def get_debt(self, debt_id: UUID, household_id: UUID) -> Optional[Debt]:
        return self.session.exec(
            select(Debt).where(Debt.id == debt_id, Debt.household_id == household_id)
        ).first()

    def list_debts(self, household_id: UUID, status: Optional[DebtStatus] = None) -> List[Debt]:
        query = select(Debt).where(Debt.household_id == household_id)
        if status is not None:
            query = query.where(Debt.status == status)
        return list(self.session.exec(query.order_by(Debt.created_at)).all())

    def create_debt(self, household_id: UUID, values: Dict[str, Any]) -> Debt:
        debt = Debt(**values, household_id=household_id)
        self.session.add(debt)
        self.session.commit()
        self.session.refresh(debt)
        return debt

    def update_debt(self, debt: Debt, changes: Dict[str, Any]) -> Debt:
        for field, value in changes.items():
            setattr(debt, field, value)
        self.session.add(debt)
        self.session.commit()
        self.session.refresh(debt)
        return debt

    def delete_debt(self, debt: Debt) -> None:
        self.session.delete(debt)
        self.session.commit()

    def list_transactions(
        self, household_id: UUID, tipo: Optional[TransactionTipo] = None
    ) -> List[Transaction]:
        query = select(Transaction).where(Transaction.household_id == household_id)
        if tipo is not None:
            query = query.where(Transaction.tipo == tipo)
        query = query.order_by(Transaction.date.desc(), Transaction.created_at.desc())
        return list(self.session.exec(query).all())
