"""
Tests for money formatting.
"""
from decimal import Decimal

import pytest
from django.template import Context, Template

from apps.orders.services.money import MoneyFormatter, format_money


class TestFormatMoney:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (165000, "$165.000"),
            (Decimal("1234567"), "$1.234.567"),
            ("999", "$999"),
            (0, "$0"),
            (Decimal("1499.5"), "$1.500"),
        ],
    )
    def test_default_format(self, value, expected):
        assert format_money(value) == expected

    def test_precision(self):
        assert format_money(Decimal("165000.5"), precision=2) == "$165.000,50"

    def test_without_symbol(self):
        assert format_money(Decimal("20"), include_symbol=False, precision=2) == "20,00"

    def test_negative_sign_goes_before_symbol(self):
        assert format_money(Decimal("-5"), precision=2) == "-$5,00"

    @pytest.mark.parametrize("value", [None, "abc", "NaN", float("inf")])
    def test_invalid_values(self, value):
        assert format_money(value) == "—"

    def test_uses_settings(self, settings):
        settings.MONEY_CURRENCY_SYMBOL = "US$"
        settings.MONEY_THOUSANDS_SEPARATOR = ","
        settings.MONEY_DECIMAL_SEPARATOR = "."

        assert format_money(Decimal("1234.5"), precision=2) == "US$1,234.50"


class TestMoneyFormatter:
    def test_format_delegates(self):
        assert MoneyFormatter().format(Decimal("1500"), False, 2) == "1.500,00"


class TestMoneyFilter:
    def test_filter(self):
        rendered = Template("{% load money %}{{ total|money }}").render(Context({"total": 165000}))

        assert rendered == "$165.000"

    def test_filter_with_precision(self):
        rendered = Template("{% load money %}{{ total|money:2 }}").render(Context({"total": Decimal("12.3")}))

        assert rendered == "$12,30"
