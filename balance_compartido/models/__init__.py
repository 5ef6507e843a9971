from balance_compartido.models.household import Household
from balance_compartido.models.debt import Debt
from balance_compartido.models.transaction import Transaction
from balance_compartido.models.enums import DebtActionKind, DebtStatus, TransactionTipo

__all__ = [
    "Household",
    "Debt",
    "Transaction",
    "DebtActionKind",
    "DebtStatus",
    "TransactionTipo",
]
