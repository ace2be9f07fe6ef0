"""
API de la barra de progreso de envío gratis.

Prefijo: /api/orders/
"""

from __future__ import annotations

import logging

from django.utils.decorators import method_decorator
from django.views.decorators.cache import never_cache
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.orders.exceptions import CartUnavailable, ConfigOrDataError
from apps.orders.serializers import FreeShippingProgressSerializer
from apps.orders.services.free_shipping_progress import FreeShippingProgress

logger = logging.getLogger(__name__)


class FreeShippingProgressAPIView(APIView):
    """GET /api/orders/free-shipping-progress/

    Devuelve el estado de la barra de envío gratis para el carrito de la sesión.
    El frontend decide cómo degradar (ocultar la barra) cuando `ok` es False.
    """

    permission_classes = [AllowAny]

    @method_decorator(never_cache)
    def get(self, request, *args, **kwargs):
        progress = FreeShippingProgress.for_request(request)

        try:
            payload = progress.to_payload()
        except CartUnavailable as e:
            return Response(
                {"ok": False, "enabled": True, "error": str(e)},
                status=status.HTTP_404_NOT_FOUND,
            )
        except ConfigOrDataError as e:
            logger.exception(
                "free-shipping-progress: datos del carrito ilegibles",
                extra={"session_key": getattr(request.session, "session_key", None)},
            )
            return Response(
                {"ok": False, "enabled": True, "error": str(e)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        data = dict(FreeShippingProgressSerializer(payload).data)
        data["ok"] = True
        return Response(data)
