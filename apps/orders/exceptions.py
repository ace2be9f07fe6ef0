class FreeShippingProgressError(Exception):
    """Base error for the free shipping progress calculator."""


class CartUnavailable(FreeShippingProgressError):
    """No hay sesión o carrito activo."""


class ConfigOrDataError(FreeShippingProgressError):
    """Los datos monetarios del carrito no se pueden leer."""
