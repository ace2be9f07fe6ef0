from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Dict

from apps.orders.constants import CART_DISCOUNT_SESSION_KEY, CART_SESSION_KEY
from apps.orders.exceptions import CartUnavailable, ConfigOrDataError


@dataclass(frozen=True)
class Cart:
    """Read-only snapshot of the active cart totals."""

    items_count: int
    subtotal: Decimal
    discount_amount: Decimal

    @property
    def subtotal_with_discount(self) -> Decimal:
        """Subtotal después de descuentos (antes de envío), nunca negativo."""
        return max(self.subtotal - self.discount_amount, Decimal("0"))


class CartProvider(ABC):
    @abstractmethod
    def get_active_cart(self) -> Cart:
        """Return the active cart or raise CartUnavailable / ConfigOrDataError."""


def _strict_decimal(value: Any, field: str) -> Decimal:
    if isinstance(value, bool):
        raise ConfigOrDataError(f"Valor monetario inválido en '{field}': {value!r}")
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value).strip())
        except (InvalidOperation, TypeError, ValueError):
            raise ConfigOrDataError(f"Valor monetario inválido en '{field}': {value!r}")
    if not amount.is_finite() or amount < 0:
        raise ConfigOrDataError(f"Valor monetario inválido en '{field}': {value!r}")
    return amount


def _strict_qty(value: Any, field: str) -> int:
    if isinstance(value, bool):
        raise ConfigOrDataError(f"Cantidad inválida en '{field}': {value!r}")
    try:
        qty = int(value)
    except (TypeError, ValueError):
        raise ConfigOrDataError(f"Cantidad inválida en '{field}': {value!r}")
    if qty < 0:
        raise ConfigOrDataError(f"Cantidad inválida en '{field}': {value!r}")
    return qty


def build_cart(raw_cart: Dict[str, Dict[str, Any]], raw_discount: Any = None) -> Cart:
    """Build a Cart snapshot from the session structure.

    Structure:
      request.session["cart"] = {
        "<variant_id>": {"qty": 2, "unit_price": "25000"},
        ...
      }
      request.session["cart_discount"] = "5000"  (opcional)
    """
    subtotal = Decimal("0")
    items_count = 0

    for variant_id, line in raw_cart.items():
        if not isinstance(line, dict):
            raise ConfigOrDataError(f"Línea de carrito inválida para la variante {variant_id}.")
        qty = _strict_qty(line.get("qty"), f"{variant_id}.qty")
        if qty == 0:
            continue
        unit_price = _strict_decimal(line.get("unit_price"), f"{variant_id}.unit_price")
        subtotal += unit_price * qty
        items_count += qty

    discount = Decimal("0")
    if raw_discount not in (None, ""):
        discount = _strict_decimal(raw_discount, CART_DISCOUNT_SESSION_KEY)

    return Cart(items_count=items_count, subtotal=subtotal, discount_amount=discount)


class SessionCartProvider(CartProvider):
    """Reads the cart stored in the Django session. Never mutates the session."""

    def __init__(self, request):
        self.request = request

    def get_active_cart(self) -> Cart:
        session = getattr(self.request, "session", None)
        if session is None:
            raise CartUnavailable("No hay una sesión activa.")

        raw_cart = session.get(CART_SESSION_KEY)
        if not isinstance(raw_cart, dict):
            raise CartUnavailable("No hay un carrito activo.")

        return build_cart(raw_cart, session.get(CART_DISCOUNT_SESSION_KEY))
