# balance_compartido/utils/debt_math.py
"""
Cálculos de amortización para deudas.

Todos los montos de dinero se redondean a dos decimales para evitar que el
error de punto flotante se acumule entre pagos.
"""

import math
import sys
from typing import Optional

# Saldo por debajo del cual una deuda se considera pagada
PAID_THRESHOLD = 0.01

# Piso para la cuota guardada al estimar el plazo restante
MIN_PAYMENT_FOR_SCHEDULE = 0.01


def round_currency(value: float) -> float:
    """Redondea a 2 decimales (mitad hacia arriba) compensando el epsilon."""
    return math.floor((value + sys.float_info.epsilon) * 100 + 0.5) / 100


def to_monthly_rate(annual_rate: Optional[float]) -> float:
    """Tasa nominal anual en porcentaje -> tasa mensual en fracción."""
    if not annual_rate or math.isnan(annual_rate) or annual_rate < 0:
        return 0.0
    return annual_rate / 12 / 100


def accrue_monthly_interest(balance: float, annual_rate: Optional[float]) -> float:
    monthly_rate = to_monthly_rate(annual_rate)
    if monthly_rate <= 0:
        return round_currency(balance)
    return round_currency(balance * (1 + monthly_rate))


def calculate_remaining_months(
    balance: float,
    monthly_payment: float,
    annual_rate: Optional[float],
) -> Optional[float]:
    """
    Número de cuotas que faltan para saldar `balance` pagando `monthly_payment`.

    Devuelve None cuando no existe un calendario válido: saldo o cuota en cero,
    o una cuota que no alcanza a cubrir los intereses del mes.
    """
    if monthly_payment <= 0 or balance <= 0:
        return None

    monthly_rate = to_monthly_rate(annual_rate)

    if monthly_rate <= 0:
        return balance / monthly_payment

    interest_portion = monthly_rate * balance
    if monthly_payment <= interest_portion:
        return None

    numerator = math.log(monthly_payment / (monthly_payment - interest_portion))
    denominator = math.log(1 + monthly_rate)

    if not math.isfinite(numerator) or not math.isfinite(denominator) or denominator == 0:
        return None

    return numerator / denominator


def calculate_monthly_payment(
    principal: float,
    annual_rate: Optional[float],
    months: int,
) -> float:
    """Cuota fija que salda `principal` en `months` meses. 0.0 si no aplica."""
    if principal <= 0 or months <= 0:
        return 0.0

    monthly_rate = to_monthly_rate(annual_rate)

    if monthly_rate <= 0:
        return round_currency(principal / months)

    factor = (1 + monthly_rate) ** months
    if factor == 1:
        return round_currency(principal / months)

    payment = principal * ((monthly_rate * factor) / (factor - 1))
    return round_currency(payment)
