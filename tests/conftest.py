"""
Pytest configuration and fixtures for the free shipping progress tests.
"""
from decimal import Decimal
from typing import Any, Dict
from unittest.mock import MagicMock

import pytest

from apps.common.services.store_config import ConfigProvider
from apps.orders.constants import (
    FREE_SHIPPING_ACTIVE,
    FREE_SHIPPING_SUBTOTAL,
    FREESHIPPING_PROGRESS_ENABLE,
    FREESHIPPING_PROGRESS_MIN_TOTAL,
    USE_FREESHIPPING_METHOD_CONFIG,
)
from apps.orders.services.cart import Cart, CartProvider
from apps.orders.services.free_shipping_progress import FreeShippingProgress
from apps.orders.services.money import MoneyFormatter


class DictConfigProvider(ConfigProvider):
    """In-memory config provider; values stored as text like the database."""

    def __init__(self, values: Dict[str, Any] = None):
        self.values = dict(values or {})

    def get_value(self, path: str) -> Any:
        return self.values.get(path)


def make_config(
    enabled: bool = True,
    use_method_config: bool = False,
    carrier_active: bool = False,
    min_total: Any = "50",
    method_subtotal: Any = "75",
) -> DictConfigProvider:
    return DictConfigProvider(
        {
            FREESHIPPING_PROGRESS_ENABLE: "1" if enabled else "0",
            USE_FREESHIPPING_METHOD_CONFIG: "1" if use_method_config else "0",
            FREE_SHIPPING_ACTIVE: "1" if carrier_active else "0",
            FREESHIPPING_PROGRESS_MIN_TOTAL: min_total,
            FREE_SHIPPING_SUBTOTAL: method_subtotal,
        }
    )


def make_cart_provider(total: Any) -> MagicMock:
    """Create a mock cart provider whose active cart has the given subtotal."""
    provider = MagicMock(spec=CartProvider)
    provider.get_active_cart.return_value = Cart(
        items_count=1,
        subtotal=Decimal(str(total)),
        discount_amount=Decimal("0"),
    )
    return provider


@pytest.fixture
def formatter() -> MagicMock:
    mock = MagicMock(spec=MoneyFormatter)
    mock.format.return_value = "formatted"
    return mock


@pytest.fixture
def build_progress(formatter):
    """Factory: build_progress(total, **config_kwargs) -> FreeShippingProgress."""

    def _build(total: Any = "30", **config_kwargs) -> FreeShippingProgress:
        return FreeShippingProgress(
            config=make_config(**config_kwargs),
            cart=make_cart_provider(total),
            formatter=formatter,
        )

    return _build
