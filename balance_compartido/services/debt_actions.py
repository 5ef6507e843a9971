# balance_compartido/services/debt_actions.py
"""
Acciones sobre deudas: pago de cuota y amortización extraordinaria.

El cálculo (`compute_debt_action`) es puro; `apply_debt_action` lo ejecuta
contra cualquier `DebtStore`, sea la base de datos o el almacén demo.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from uuid import UUID

from balance_compartido.core.exceptions import NotFoundError, ValidationError
from balance_compartido.models.debt import Debt
from balance_compartido.models.enums import DebtActionKind, DebtStatus, TransactionTipo
from balance_compartido.models.transaction import Transaction
from balance_compartido.schemas.debt_action import DebtActionRequest
from balance_compartido.stores.base import DebtStore
from balance_compartido.utils.debt_math import (
    MIN_PAYMENT_FOR_SCHEDULE,
    PAID_THRESHOLD,
    accrue_monthly_interest,
    calculate_monthly_payment,
    calculate_remaining_months,
    round_currency,
)

logger = logging.getLogger(__name__)

ACTION_LABELS = {
    DebtActionKind.pay_installment: "Cuota",
    DebtActionKind.amortize: "Amortización",
}


@dataclass
class DebtActionOutcome:
    balance: float
    monthly_payment: float
    status: DebtStatus
    changes: Dict[str, Any] = field(default_factory=dict)
    # False cuando la amortización no pudo recalcular la cuota y se conservó la anterior
    payment_recalculated: bool = False


@dataclass
class DebtActionResult:
    debt: Debt
    transaction: Transaction


def parse_action(action: Any) -> DebtActionKind:
    try:
        return DebtActionKind(action)
    except ValueError:
        raise ValidationError(f"Acción de deuda inválida: {action!r}")


def validate_amount(amount: Any) -> float:
    try:
        value = float(amount)
    except (TypeError, ValueError):
        raise ValidationError("El monto debe ser un número mayor a 0")
    if not math.isfinite(value) or value <= 0:
        raise ValidationError("El monto debe ser un número mayor a 0")
    return value


def _recalculate_payment(debt: Debt, new_balance: float, interest_rate: float) -> Optional[float]:
    """Cuota que salda `new_balance` en los meses que le quedaban a la deuda."""
    remaining_months = calculate_remaining_months(
        debt.balance,
        max(debt.monthly_payment, MIN_PAYMENT_FOR_SCHEDULE),
        interest_rate,
    )
    if remaining_months is None or not math.isfinite(remaining_months) or remaining_months <= 0:
        return None

    months = max(1, math.floor(remaining_months + 0.5))
    payment = calculate_monthly_payment(new_balance, interest_rate, months)
    return payment if payment > 0 else None


def compute_debt_action(debt: Debt, action: DebtActionKind, amount: float) -> DebtActionOutcome:
    """
    Nuevo estado de la deuda tras aplicar `action` por `amount`.

    - pay_installment: capitaliza un mes de interés y luego resta el pago.
      La cuota pactada no cambia.
    - amortize: resta el pago sin interés y recalcula la cuota para mantener
      el mismo plazo restante.

    Un saldo resultante <= 0.01 deja la deuda pagada, con cuota 0.
    """
    interest_rate = debt.interest_rate or 0

    if action == DebtActionKind.pay_installment:
        balance_with_interest = accrue_monthly_interest(debt.balance, interest_rate)
        new_balance = round_currency(balance_with_interest - amount)
    else:
        new_balance = round_currency(max(debt.balance - amount, 0))

    if new_balance < 0:
        new_balance = 0.0

    monthly_payment = round_currency(debt.monthly_payment)
    recalculated = False

    if action == DebtActionKind.amortize and new_balance > 0:
        payment = _recalculate_payment(debt, new_balance, interest_rate)
        if payment is not None:
            monthly_payment = payment
            recalculated = True

    status = DebtStatus(debt.status)
    if new_balance <= PAID_THRESHOLD:
        new_balance = 0.0
        monthly_payment = 0.0
        status = DebtStatus.pagada

    changes: Dict[str, Any] = {"balance": round_currency(new_balance)}
    if action == DebtActionKind.amortize or status == DebtStatus.pagada:
        changes["monthly_payment"] = round_currency(monthly_payment)
    if status != debt.status:
        changes["status"] = status

    return DebtActionOutcome(
        balance=new_balance,
        monthly_payment=monthly_payment,
        status=status,
        changes=changes,
        payment_recalculated=recalculated,
    )


def build_transaction_values(
    debt: Debt,
    request: DebtActionRequest,
    household_id: UUID,
    amount: float,
) -> Dict[str, Any]:
    action = parse_action(request.action)
    nota = request.nota
    if nota is None:
        nota = f"Pago de deuda: {debt.entity} - {ACTION_LABELS[action]}"

    return {
        "household_id": household_id,
        "monto": round_currency(amount),
        "tipo": TransactionTipo.deuda,
        "category": debt.entity,
        "persona": request.persona,
        "date": request.date,
        "metodo": request.metodo,
        "nota": nota,
    }


def apply_debt_action(
    store: DebtStore,
    household_id: UUID,
    request: DebtActionRequest,
) -> DebtActionResult:
    """
    Aplica la acción: lee la deuda, calcula, guarda la deuda y registra la
    transacción en una sola unidad de trabajo.

    Raises:
        ValidationError: monto inválido, acción desconocida, persona vacía o
            deuda ya pagada.
        NotFoundError: la deuda no existe en el hogar.
    """
    action = parse_action(request.action)
    amount = validate_amount(request.monto)
    if not request.persona or not request.persona.strip():
        raise ValidationError("La persona es obligatoria")

    with store.unit_of_work(request.debt_id) as unit:
        debt = unit.get_debt(request.debt_id, household_id)
        if debt is None:
            raise NotFoundError("Deuda no encontrada")
        if debt.status == DebtStatus.pagada:
            raise ValidationError("La deuda ya está pagada")

        previous_balance = debt.balance
        outcome = compute_debt_action(debt, action, amount)
        if action == DebtActionKind.amortize and outcome.balance > 0 and not outcome.payment_recalculated:
            logger.warning(
                "Deuda %s sin calendario válido; se conserva la cuota %.2f",
                debt.id,
                debt.monthly_payment,
            )

        transaction_values = build_transaction_values(debt, request, household_id, amount)
        updated_debt = unit.update_debt(debt, outcome.changes)
        transaction = unit.insert_transaction(transaction_values)

    logger.info(
        "Acción %s sobre deuda %s: saldo %.2f -> %.2f (%s)",
        action.value,
        updated_debt.id,
        previous_balance,
        outcome.balance,
        outcome.status.value,
    )
    return DebtActionResult(debt=updated_debt, transaction=transaction)
