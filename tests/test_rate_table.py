"""Rate table invariants and immutability."""

import pytest

from currency_converter.models.constants import CURRENCIES
from currency_converter.services.rates.table import RateTable


def test_bases_are_the_six_supported_currencies_in_order(table):
    assert table.base_currencies == list(CURRENCIES)
    assert len(table) == 6


@pytest.mark.parametrize("base", CURRENCIES)
def test_each_base_quotes_every_other_currency(table, base):
    quotes = table.targets(base)
    assert set(quotes) == set(CURRENCIES) - {base}
    assert all(rate > 0 for rate in quotes.values())


def test_thirty_directed_entries(table):
    assert sum(len(table.targets(b)) for b in table.base_currencies) == 30


def test_rates_kept_verbatim_not_reciprocal(table):
    assert table.get_rate("USD", "EUR") == 0.85
    assert table.get_rate("EUR", "USD") == 1.18
    assert table.get_rate("JPY", "USD") == 0.0091
    assert table.get_rate("CAD", "INR") == 59.6


def test_get_rate_unknown_pairs(table):
    assert table.get_rate("XYZ", "EUR") is None
    assert table.get_rate("USD", "XYZ") is None
    assert table.get_rate("USD", "USD") is None


def test_table_cannot_be_mutated(table):
    with pytest.raises(TypeError):
        table.targets("USD")["EUR"] = 1.0  # type: ignore[index]


def test_as_dict_returns_a_copy(table):
    snapshot = table.as_dict()
    snapshot["USD"]["EUR"] = 99.0
    assert table.get_rate("USD", "EUR") == 0.85


def test_rejects_self_quote():
    with pytest.raises(ValueError, match="against itself"):
        RateTable({"USD": {"USD": 1.0, "EUR": 0.85}, "EUR": {"USD": 1.18}})


def test_rejects_missing_target():
    with pytest.raises(ValueError, match="every other base"):
        RateTable({"USD": {"EUR": 0.85}, "EUR": {"USD": 1.18}, "GBP": {"USD": 1.37, "EUR": 1.16}})


@pytest.mark.parametrize("bad", [0, -1.5, float("inf"), float("nan")])
def test_rejects_non_positive_or_non_finite_rates(bad):
    with pytest.raises(ValueError, match="must be positive"):
        RateTable({"USD": {"EUR": bad}, "EUR": {"USD": 1.18}})


def test_codes_are_normalized_to_upper_case():
    t = RateTable({"usd": {"eur": 0.85}, "eur": {"usd": 1.18}})
    assert t.base_currencies == ["USD", "EUR"]
    assert t.get_rate("USD", "EUR") == 0.85
