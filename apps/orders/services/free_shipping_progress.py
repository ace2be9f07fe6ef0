from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Dict

from apps.common.services.store_config import ConfigProvider, DatabaseConfigProvider
from apps.orders.constants import (
    FREE_SHIPPING_ACTIVE,
    FREE_SHIPPING_SUBTOTAL,
    FREESHIPPING_PROGRESS_ENABLE,
    FREESHIPPING_PROGRESS_MIN_TOTAL,
    USE_FREESHIPPING_METHOD_CONFIG,
)
from apps.orders.services.cart import CartProvider, SessionCartProvider
from apps.orders.services.money import CurrencyFormatter, MoneyFormatter

logger = logging.getLogger(__name__)


class FreeShippingProgress:
    """
    Indicador de progreso hacia el envío gratis para el carrito activo.

    Cada método lee configuración y carrito en el momento de la llamada
    (sin caché): dos llamadas pueden ver totales distintos si el carrito cambió.

    Errores:
    - CartUnavailable: no hay sesión/carrito activo.
    - ConfigOrDataError: el carrito tiene datos monetarios ilegibles.
    """

    def __init__(self, config: ConfigProvider, cart: CartProvider, formatter: CurrencyFormatter):
        self.config = config
        self.cart = cart
        self.formatter = formatter

    @classmethod
    def for_request(cls, request) -> "FreeShippingProgress":
        return cls(
            config=DatabaseConfigProvider(),
            cart=SessionCartProvider(request),
            formatter=MoneyFormatter(),
        )

    def is_enabled(self) -> bool:
        return self.config.is_set_flag(FREESHIPPING_PROGRESS_ENABLE)

    def get_current_total(self) -> Decimal:
        return self.cart.get_active_cart().subtotal_with_discount

    def get_free_shipping_method_min_value(self) -> Decimal:
        return self.config.get_decimal(FREE_SHIPPING_SUBTOTAL)

    def get_free_shipping_min_value(self) -> Decimal:
        """Single source of truth for the subtotal that triggers free shipping.

        Rules:
        - method config enabled AND free shipping carrier active -> carrier subtotal
        - otherwise -> standalone progress bar minimum total
        """
        if self.config.is_set_flag(USE_FREESHIPPING_METHOD_CONFIG) and self.config.is_set_flag(FREE_SHIPPING_ACTIVE):
            return self.get_free_shipping_method_min_value()

        return self.config.get_decimal(FREESHIPPING_PROGRESS_MIN_TOTAL)

    def is_free_shipping_eligible(self) -> bool:
        return self._is_eligible(self.get_current_total())

    def _is_eligible(self, current_total: Decimal) -> bool:
        if self.config.is_set_flag(USE_FREESHIPPING_METHOD_CONFIG):
            if self.config.is_set_flag(FREE_SHIPPING_ACTIVE):
                return current_total >= self.get_free_shipping_method_min_value()
            # Carrier inactive: never eligible, no fallback to the standalone minimum.
            return False

        return current_total >= self.get_free_shipping_min_value()

    def get_free_shipping_difference(self) -> Decimal:
        """Signed: negative once the cart already qualifies."""
        current_total = self.get_current_total()
        return self.get_free_shipping_min_value() - current_total

    def get_free_shipping_completion_percent(self) -> Decimal:
        """Raises ZeroDivisionError when the minimum resolves to 0."""
        return (self.get_current_total() / self.get_free_shipping_min_value()) * 100

    def get_formatted_price(self, price, precision: int = 2) -> str:
        return self.formatter.format(price, False, precision)

    def to_payload(self) -> Dict[str, Any]:
        """Snapshot for the storefront widget.

        Nota: el total del carrito se lee una sola vez para que las cifras del
        payload sean coherentes entre sí.
        """
        if not self.is_enabled():
            return {"enabled": False}

        current_total = self.get_current_total()
        min_total = self.get_free_shipping_min_value()
        eligible = self._is_eligible(current_total)
        difference = min_total - current_total

        try:
            completion_percent = (current_total / min_total) * 100
        except ZeroDivisionError:
            logger.warning(
                "Mínimo para envío gratis en cero; porcentaje no disponible",
                extra={"current_total": str(current_total)},
            )
            completion_percent = None

        return {
            "enabled": True,
            "min_total": min_total,
            "current_total": current_total,
            "eligible": eligible,
            "difference": difference,
            "completion_percent": completion_percent,
            "min_total_formatted": self.get_formatted_price(min_total),
            "current_total_formatted": self.get_formatted_price(current_total),
            "remaining_formatted": self.get_formatted_price(max(difference, Decimal("0"))),
        }
