# apps/orders/services/__init__.py
from apps.orders.services.cart import Cart, CartProvider, SessionCartProvider
from apps.orders.services.free_shipping_progress import FreeShippingProgress
from apps.orders.services.money import CurrencyFormatter, MoneyFormatter, format_money

__all__ = [
    "Cart",
    "CartProvider",
    "CurrencyFormatter",
    "FreeShippingProgress",
    "MoneyFormatter",
    "SessionCartProvider",
    "format_money",
]
