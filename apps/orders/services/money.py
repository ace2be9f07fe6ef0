"""apps.orders.services.money

Formateo monetario consistente en todo el proyecto.
Objetivo: mostrar valores como $165.000 (COP) o 165.000,50 con decimales.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import ROUND_HALF_UP, Decimal
from typing import Union

from django.conf import settings

Amount = Union[int, float, Decimal, str, None]


def format_money(value: Amount, include_symbol: bool = True, precision: int = 0) -> str:
    """Formatea un número como moneda.

    Ejemplo:
        165000 -> $165.000
        165000.5 (precision=2) -> $165.000,50

    Reglas:
        - None o valores inválidos -> "—"
        - Sin sufijo "COP" (solo símbolo y separadores)
        - Redondeo half-up a `precision` decimales
    """
    if value is None:
        return "—"

    try:
        amount = Decimal(str(value))
    except Exception:
        return "—"
    if not amount.is_finite():
        return "—"

    precision = max(0, int(precision))
    amount = amount.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_HALF_UP)

    thousands = getattr(settings, "MONEY_THOUSANDS_SEPARATOR", ".")
    decimal_sep = getattr(settings, "MONEY_DECIMAL_SEPARATOR", ",")

    # Python usa "," para miles y "." para decimales.
    formatted = f"{abs(amount):,.{precision}f}"
    formatted = formatted.replace(",", "\x00").replace(".", decimal_sep).replace("\x00", thousands)

    sign = "-" if amount < 0 else ""
    if include_symbol:
        symbol = getattr(settings, "MONEY_CURRENCY_SYMBOL", "$")
        return f"{sign}{symbol}{formatted}"
    return f"{sign}{formatted}"


class CurrencyFormatter(ABC):
    @abstractmethod
    def format(self, amount: Amount, include_symbol: bool, precision: int) -> str:
        ...


class MoneyFormatter(CurrencyFormatter):
    def format(self, amount: Amount, include_symbol: bool = True, precision: int = 0) -> str:
        return format_money(amount, include_symbol=include_symbol, precision=precision)
