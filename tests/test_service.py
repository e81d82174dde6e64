"""ConversionService logic tests."""

import pytest

from currency_converter.services.converter_service import ConversionService
from currency_converter.services.rates.conversion import (
    InvalidAmount,
    MissingFields,
    UnsupportedCurrency,
)
from currency_converter.services.rates.table import RateTable


def test_health(service):
    body = service.health()
    assert body["status"] == "healthy"
    assert body["service"] == "currency-converter"
    assert body["timestamp"].endswith("Z")


def test_list_rates(service, table):
    body = service.list_rates()
    assert body["rates"] == table.as_dict()
    assert body["base_currencies"] == table.base_currencies


def test_list_rates_returns_independent_copies(service, table):
    service.list_rates()["rates"]["USD"]["EUR"] = 0.0
    assert table.get_rate("USD", "EUR") == 0.85


def test_convert(service):
    result = service.convert("cad", "jpy", "10")
    assert (result.source, result.target) == ("CAD", "JPY")
    assert result.converted_amount == 880.0


@pytest.mark.parametrize(
    "source, target, has_amount",
    [(None, "EUR", True), ("USD", None, True), ("USD", "EUR", False), ("", "EUR", True)],
)
def test_convert_fields_missing(service, source, target, has_amount):
    with pytest.raises(MissingFields):
        service.convert_fields(source, target, 10, has_amount=has_amount)


def test_convert_fields_null_amount_is_invalid(service):
    with pytest.raises(InvalidAmount):
        service.convert_fields("USD", "EUR", None, has_amount=True)


def test_convert_fields_delegates(service):
    with pytest.raises(UnsupportedCurrency):
        service.convert_fields("ABC", "EUR", 1, has_amount=True)
    assert service.convert_fields("USD", "GBP", 100, has_amount=True).converted_amount == 73.0


def test_explicit_empty_table_is_kept():
    empty = RateTable({})
    svc = ConversionService(empty)
    assert svc.table is empty
    assert svc.list_rates()["base_currencies"] == []
    with pytest.raises(UnsupportedCurrency):
        svc.convert("USD", "EUR", 1)


def test_default_table_when_none_given(table):
    assert ConversionService().table is table
