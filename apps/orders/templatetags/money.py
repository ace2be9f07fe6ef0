"""apps.orders.templatetags.money

Uso en templates:
    {% load money %}
    {{ order.total|money }}
    {{ progress.difference|money:2 }}
"""

from django import template

from apps.orders.services.money import format_money

register = template.Library()


@register.filter(name="money")
def money_filter(value, precision=0):
    """Template usage:
        {{ order.total|money }}
    """
    try:
        precision = int(precision)
    except (TypeError, ValueError):
        precision = 0
    return format_money(value, precision=precision)
