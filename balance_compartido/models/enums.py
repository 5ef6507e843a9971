from enum import Enum

class DebtStatus(str, Enum):
    activa = "activa"
    pagada = "pagada"
    morosa = "morosa"

class TransactionTipo(str, Enum):
    ingreso = "ingreso"
    gasto = "gasto"
    deuda = "deuda"

class DebtActionKind(str, Enum):
    pay_installment = "pay_installment"  # cuota regular, con interés del mes
    amortize = "amortize"  # abono extraordinario a capital
