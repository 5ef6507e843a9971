from balance_compartido.stores.base import DebtStore, DebtUnitOfWork
from balance_compartido.stores.demo import DEMO_HOUSEHOLD_ID, DemoDebtStore
from balance_compartido.stores.sql import SqlDebtStore

__all__ = [
    "DebtStore",
    "DebtUnitOfWork",
    "DemoDebtStore",
    "SqlDebtStore",
    "DEMO_HOUSEHOLD_ID",
]
