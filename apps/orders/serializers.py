from __future__ import annotations

from rest_framework import serializers


class FreeShippingProgressSerializer(serializers.Serializer):
    """Payload de la barra de progreso de envío gratis.

    Si la funcionalidad está deshabilitada solo se envía `enabled`.
    """

    enabled = serializers.BooleanField()
    min_total = serializers.DecimalField(max_digits=None, decimal_places=2, required=False)
    current_total = serializers.DecimalField(max_digits=None, decimal_places=2, required=False)
    eligible = serializers.BooleanField(required=False)
    # Con signo: negativo cuando el carrito ya califica.
    difference = serializers.DecimalField(max_digits=None, decimal_places=2, required=False)
    # None cuando el mínimo es 0.
    completion_percent = serializers.DecimalField(max_digits=None, decimal_places=2, required=False)
    min_total_formatted = serializers.CharField(required=False)
    current_total_formatted = serializers.CharField(required=False)
    remaining_formatted = serializers.CharField(required=False)
