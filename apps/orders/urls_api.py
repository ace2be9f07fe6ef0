"""
URLs de la API de órdenes.

Prefijo montado en config/urls.py como /api/orders/
"""
from django.urls import path

from . import views_api

app_name = "orders_api"

urlpatterns = [
    # Aceptar rutas con y sin slash final para evitar redirecciones 301
    path(
        "free-shipping-progress/",
        views_api.FreeShippingProgressAPIView.as_view(),
        name="free-shipping-progress",
    ),
    path(
        "free-shipping-progress",
        views_api.FreeShippingProgressAPIView.as_view(),
        name="free-shipping-progress-no-slash",
    ),
]
