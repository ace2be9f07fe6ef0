"""Rutas de configuración usadas por la barra de progreso de envío gratis."""

CHECKOUT_CART_CONFIG_PATH = "checkout/cart/"
CARRIERS_FREE_SHIPPING_CONFIG_PATH = "carriers/freeshipping/"

FREESHIPPING_PROGRESS_ENABLE = CHECKOUT_CART_CONFIG_PATH + "freeshipping_progress_enable"
USE_FREESHIPPING_METHOD_CONFIG = CHECKOUT_CART_CONFIG_PATH + "use_freeshipping_method_config"
FREESHIPPING_PROGRESS_MIN_TOTAL = CHECKOUT_CART_CONFIG_PATH + "freeshipping_progress_min_total"

FREE_SHIPPING_ACTIVE = CARRIERS_FREE_SHIPPING_CONFIG_PATH + "active"
FREE_SHIPPING_SUBTOTAL = CARRIERS_FREE_SHIPPING_CONFIG_PATH + "free_shipping_subtotal"

CART_SESSION_KEY = "cart"
CART_DISCOUNT_SESSION_KEY = "cart_discount"
